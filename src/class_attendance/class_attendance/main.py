from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import RequestEntityTooLarge

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import upload_too_large
from .container import Container, build_container
from .core.constants import DEFAULT_ATTENDANCE_THRESHOLD, MAX_UPLOAD_MB
from .database.bootstrap import apply_schema, ensure_demo_student, list_tables
from .stats.controller import register as register_stats
from .timetable.controller import register as register_timetable
from .users.controller import register as register_users

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", MAX_UPLOAD_MB)) * 1024 * 1024
    default_threshold = int(getattr(settings, "DEFAULT_ATTENDANCE_THRESHOLD", DEFAULT_ATTENDANCE_THRESHOLD))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    log = logging.getLogger("class_attendance")

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            log.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_student(db_config)
            log.info("demo student ready")

        container = build_container(db_config=db_config, default_threshold=default_threshold)

    app.extensions["class_attendance"] = container
    app.register_error_handler(RequestEntityTooLarge, upload_too_large)

    register_users(app, container)
    register_timetable(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    return app
