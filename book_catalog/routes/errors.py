"""Error pipeline: app-wide handlers rendering the single error view.

Handlers, most specific first:
    - CatalogError    -> status from the error (BookNotFoundError -> 404)
    - HTTPException   -> werkzeug status (unmatched routes raise NotFound -> 404)
    - Exception       -> 500

The exception object and traceback reach the template only in the
development environment; elsewhere a generic message is rendered.
"""
from __future__ import annotations

import traceback
from typing import Any, Optional

from flask import current_app, render_template, request
from flask_babel import gettext as _
from werkzeug.exceptions import HTTPException

from book_catalog import config as app_config
from book_catalog.services.errors import CatalogError
from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.errors")

DEFAULT_STATUS = 500


def _is_development() -> bool:
    return app_config.is_development(current_app.config.get("BOOK_CATALOG_ENV"))


def _title_for(status: int) -> str:
    if status == 404:
        return _("Page Not Found")
    if 400 <= status < 500:
        return _("Bad Request")
    return _("Server Error")


def _message_for(status: int) -> str:
    if status == 404:
        return _("Sorry! We couldn't find the page you were looking for.")
    if 400 <= status < 500:
        return _("Sorry! The request could not be processed.")
    return _("Sorry! There was an unexpected error on the server.")


def status_for(exc: BaseException) -> int:
    """Status carried by ``exc``; 500 when it carries none."""
    if isinstance(exc, CatalogError):
        return exc.status_code or DEFAULT_STATUS
    if isinstance(exc, HTTPException):
        return exc.code or DEFAULT_STATUS
    return DEFAULT_STATUS


def render_error(exc: BaseException, status: Optional[int] = None):
    status = status or status_for(exc)
    show_detail = _is_development()
    context = {
        "title": _title_for(status),
        "status": status,
        "message": _message_for(status),
        "error": exc if show_detail else None,
        "error_trace": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        if show_detail
        else None,
    }
    return render_template("error.html", **context), status


def _handle_catalog_error(exc: CatalogError):
    LOG.info("%s %s -> %s (%s)", request.method, request.path, exc.status_code, exc)
    return render_error(exc)


def _handle_http_exception(exc: HTTPException):
    status = status_for(exc)
    if status == 404:
        LOG.info("Page not found: %s %s", request.method, request.path)
    elif status >= 500:
        LOG.error("HTTP %s on %s %s", status, request.method, request.path)
    return render_error(exc, status)


def _handle_unexpected(exc: Exception):
    LOG.error("Unhandled exception on %s %s", request.method, request.path, exc_info=exc)
    return render_error(exc, DEFAULT_STATUS)


def register_error_handlers(app: Any) -> None:
    if getattr(app, "_catalog_error_handlers", False):  # idempotent
        return
    app.register_error_handler(CatalogError, _handle_catalog_error)
    app.register_error_handler(HTTPException, _handle_http_exception)
    app.register_error_handler(Exception, _handle_unexpected)
    setattr(app, "_catalog_error_handlers", True)
    LOG.debug("error handlers registered")


__all__ = ["register_error_handlers", "render_error", "status_for"]
