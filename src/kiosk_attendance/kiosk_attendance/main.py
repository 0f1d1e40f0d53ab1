from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_SCAN_LOG_LIMIT, EARLY_ACCESS_MINUTES, FIRST_SCAN_WINS
from .database.bootstrap import apply_schema
from .scans.controller import register as register_scans
from .sessions.controller import register as register_sessions
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)

    container = build_container(
        db_config=db_config,
        early_access_minutes=int(getattr(settings, "EARLY_ACCESS_MINUTES", EARLY_ACCESS_MINUTES)),
        first_scan_wins=bool(getattr(settings, "FIRST_SCAN_WINS", FIRST_SCAN_WINS)),
        scan_log_limit=int(getattr(settings, "SCAN_LOG_LIMIT", DEFAULT_SCAN_LOG_LIMIT)),
    )

    register_sessions(app, container)
    register_students(app, container)
    register_scans(app, container)
    register_attendance(app, container)

    return app
