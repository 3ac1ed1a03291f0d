"""Application configuration."""

from __future__ import annotations

import os

from cuadrantes.shifts import DEFAULT_SHIFT_SCHEDULE


class Config:
    ENV = os.getenv("ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    APP_URL = os.getenv("APP_URL", "http://localhost:8000")
    APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Europe/Madrid")
    DEFAULT_SHIFT_SCHEDULE = os.getenv("DEFAULT_SHIFT_SCHEDULE", DEFAULT_SHIFT_SCHEDULE)
