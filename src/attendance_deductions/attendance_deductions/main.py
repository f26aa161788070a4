from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_OFFICIAL_CHECK_IN_TIME
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .deductions.controller import register as register_deductions

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Container | None = None) -> Flask:
    """Application factory. Pass a container to bypass MySQL wiring (tests)."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_format=bool(getattr(settings, "LOG_JSON", False)),
    )

    official_check_in_time = getattr(settings, "OFFICIAL_CHECK_IN_TIME", DEFAULT_OFFICIAL_CHECK_IN_TIME)
    app.config["OFFICIAL_CHECK_IN_TIME"] = official_check_in_time

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("Starting with settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, official_check_in_time=official_check_in_time)

    register_deductions(app, container)
    return app
