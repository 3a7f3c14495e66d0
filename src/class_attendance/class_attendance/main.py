from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging, get_logger
from .container import build_container

logger = get_logger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    # Under test the runner owns the root logger.
    if not app.config["TESTING"]:
        configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting class attendance (settings=%s)", settings_module)

    container = build_container(
        alert_display_limit=int(getattr(settings, "ALERT_DISPLAY_LIMIT", 10)),
        max_sessions=int(getattr(settings, "MAX_SESSIONS", 100)),
    )
    app.extensions["class_attendance"] = container

    register_attendance(app, container)

    return app
