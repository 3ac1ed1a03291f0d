from __future__ import annotations

from typing import Iterator

import pytest

from cuadrantes import create_app
from cuadrantes.config import Config


class TestConfig(Config):
    TESTING = True
    APP_TIMEZONE = "Europe/Madrid"
    DEFAULT_SHIFT_SCHEDULE = "08:00-17:00"
    LOG_LEVEL = "DEBUG"


@pytest.fixture()
def app() -> Iterator:
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()
