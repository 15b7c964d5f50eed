from __future__ import annotations

import importlib
import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_app_users, list_tables
from .database.seed import seed_demo_data
from .employees.controller import register as register_employees
from .i18n.controller import register as register_locale
from .records.controller import register as register_records
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def load_settings(settings_module: Optional[str] = None) -> Any:
    return importlib.import_module(settings_module or get_settings_module())


def _prepare_storage(settings: Any, container: Container) -> None:
    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        ensure_app_users(container.conn, getattr(settings, "DEMO_USERS", []))
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(container.employees_repo, container.records_repo)


def create_app(settings: Any = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    if settings is None:
        settings = load_settings()

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    if container is None:
        container = build_container(settings)
        _prepare_storage(settings, container)
    app.extensions["wage_dashboard"] = container

    logger.debug(
        "settings=%s storage=%s",
        getattr(settings, "__name__", type(settings).__name__),
        getattr(settings, "STORAGE_BACKEND", "json"),
    )

    register_users(app, container)
    register_locale(app, container)
    register_employees(app, container)
    register_records(app, container)
    register_reports(app, container)

    return app
