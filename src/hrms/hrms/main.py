from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import BACKEND_MYSQL, Container, build_container
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .performance.controller import register as register_performance
from .recruitment.controller import register as register_recruitment
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def _cors_origins(value: str):
    if value == "*":
        return value
    return [o.strip() for o in value.split(",") if o.strip()]


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return jsonify({"success": False, "message": "Internal server error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CORS_ORIGINS"] = getattr(settings, "CORS_ORIGINS", "*")
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    backend = getattr(settings, "DB_BACKEND", BACKEND_MYSQL)

    if container is None:
        logger.info(
            "settings=%s backend=%s db=%s@%s:%s/%s",
            settings_module,
            backend,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if backend == BACKEND_MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, backend=backend)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(container)

    app.extensions["hrms_container"] = container

    CORS(app, origins=_cors_origins(app.config["CORS_ORIGINS"]))

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_recruitment(app, container)
    register_performance(app, container)

    return app
