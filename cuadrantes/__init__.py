"""Flask application factory."""

from __future__ import annotations

from flask import Flask

from cuadrantes.blueprints.calendar import bp as calendar_bp
from cuadrantes.blueprints.main import bp as main_bp
from cuadrantes.config import Config


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=False)
    app.config.from_object(config_object)

    # Module loggers (cuadrantes.dates, cuadrantes.medical_leave ...) propagate to app.logger.
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    app.register_blueprint(main_bp)
    app.register_blueprint(calendar_bp)

    return app
