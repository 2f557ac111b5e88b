from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .bootstrap import seed_demo_data
from .common.app_logger import setup_logging
from .container import build_container
from .holidays.controller import register as register_holidays
from .students.controller import register as register_students


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    container = build_container(
        quota_counts_present_only=bool(getattr(settings, "QUOTA_COUNTS_PRESENT_ONLY", False)),
    )
    if getattr(settings, "SEED_DEMO_DATA", False):
        seed_demo_data(container)
        logger.info("demo seed ready")

    app.extensions["container"] = container

    register_attendance(app, container)
    register_holidays(app, container)
    register_students(app, container)

    return app
