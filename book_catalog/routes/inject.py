"""Route registration.

Called from startup to register blueprints and the error pipeline.
"""
from __future__ import annotations
from typing import Any

from .books import register_books_blueprint
from .errors import register_error_handlers
from .health import register_health
from .home import register_home
from .request_log import register_request_logging


def register_all(app: Any) -> None:
    register_request_logging(app)
    register_home(app)
    register_books_blueprint(app)
    register_health(app)
    register_error_handlers(app)

__all__ = ["register_all"]
