from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import build_container
from .core.exceptions import NotFoundError, PersistenceError, ValidationError
from .schedules.controller import register as register_schedules
from .subjects.controller import register as register_subjects

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    logger.info("settings=%s", settings_module)

    container = build_container(settings)
    app.extensions["attendify"] = container

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return {"success": False, "message": str(e)}, 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return {"success": False, "message": str(e)}, 404

    @app.errorhandler(PersistenceError)
    def _persistence_error(e: PersistenceError):
        logger.error("Persistence failure: %s", e)
        return {"success": False, "message": "Saved in memory, but storage is unavailable"}, 503

    register_subjects(app, container)
    register_attendance(app, container)
    register_analytics(app, container)
    register_schedules(app, container)

    return app
