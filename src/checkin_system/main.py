from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .settings import get_settings_module

from .database.connection import DBConfig
from .database.bootstrap import apply_schema, list_tables, seed_demo_students
from .schedules.loader import load_checkin_settings

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .reports.controller import register as register_reports
from .students.controller import register as register_students

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

SCHEMA_PATH = Path(__file__).resolve().parent / "database" / "schema.sql"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Passing a ready ``container`` skips database bootstrap; tests use that
    with in-memory repositories.
    """
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        # Raises ConfigurationError on a bad schedule; the app must not start.
        checkin = load_checkin_settings(settings)

        logger.info(
            "settings=%s db=%s tz=%s epoch=%s",
            settings_module,
            DBConfig.from_dict(db_config).describe(),
            checkin.tz.key,
            checkin.epoch_date,
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            seed_demo_students(db_config)

        container = build_container(
            db_config=db_config,
            checkin=checkin,
            admin_password=getattr(settings, "ADMIN_PASSWORD", None),
        )

    register_auth(app, container)
    register_attendance(app, container)
    register_students(app, container)
    register_reports(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
