from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .clients.controller import register as register_clients
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .logging_config import setup_logging
from .uploads.controller import register as register_uploads

logger = logging.getLogger(__name__)

_SETTINGS_KEYS = (
    "DEBUG",
    "TESTING",
    "UPLOAD_DIR",
    "UPLOAD_URL_PREFIX",
    "MAX_CONTENT_LENGTH",
    "PAGE_SIZE",
    "PAGINATION_WINDOW",
)


def create_app(container: Optional[Container] = None, **overrides) -> Flask:
    """Build the Flask app.

    ``container`` replaces the MySQL-backed wiring (tests pass in-memory fakes);
    ``overrides`` are applied on top of the selected settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for key in _SETTINGS_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config.update(overrides)

    setup_logging(overrides.get("LOG_LEVEL", getattr(settings, "LOG_LEVEL", "INFO")))

    db_config = dict(getattr(settings, "DB_CONFIG"))
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config)
            logger.info("sample clients loaded")

        container = build_container(
            db_config=db_config,
            upload_dir=app.config.get("UPLOAD_DIR", "uploads"),
            page_size=int(app.config.get("PAGE_SIZE", 5)),
        )

    register_clients(app, container)
    register_uploads(app, container)

    return app
