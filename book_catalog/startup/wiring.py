"""Application initialization / wiring.

Orchestrates: config, DB init (schema creation), CSRF, translations, route
and error handler registration.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_wtf import CSRFProtect

from book_catalog import config as app_config
from book_catalog.db.engine import EXTENSION_KEY, init_database
from book_catalog.i18n import configure_translations
from book_catalog.routes.inject import register_all as register_routes
from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.startup")

csrf = CSRFProtect()


def init_app(app: Any) -> None:
    LOG.debug("init_app starting")
    db = init_database(app.config["DATABASE_URL"])
    app.extensions[EXTENSION_KEY] = db
    LOG.debug("DB engine initialized")
    csrf.init_app(app)
    configure_translations(app)
    register_routes(app)
    LOG.info("App startup wiring complete (env=%s db=%s)", app.config.get("BOOK_CATALOG_ENV"), db.url)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask("book_catalog")
    app.config.update(app_config.flask_settings())
    if overrides:
        app.config.update(overrides)
    init_app(app)
    return app


__all__ = ["init_app", "create_app"]
