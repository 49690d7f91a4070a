from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .common.logging_config import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_API_PREFIX
from .database.bootstrap import ensure_indexes, list_collections, seed_demo_data
from .stats.controller import register as register_stats
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    logger.info(
        "settings=%s db=%s/%s", settings_module, db_config.get("uri"), db_config.get("database")
    )

    prefix = str(getattr(settings, "API_PREFIX", DEFAULT_API_PREFIX)).rstrip("/")
    CORS(app, resources={f"{prefix}/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        container = build_container(
            db_config=db_config,
            strict_student_reference=bool(getattr(settings, "STRICT_STUDENT_REFERENCE", False)),
            unique_daily_attendance=bool(getattr(settings, "UNIQUE_DAILY_ATTENDANCE", False)),
        )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        ensure_indexes(container.conn)
        logger.info("schema ready (collections=%d)", len(list_collections(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(container.conn)

    app.extensions["student_attendance"] = container

    register_error_handlers(app)
    register_students(app, container, prefix=prefix)
    register_attendance(app, container, prefix=prefix)
    register_stats(app, container, prefix=prefix)

    return app
