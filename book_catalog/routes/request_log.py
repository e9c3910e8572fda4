"""Per-request access log line (method, path, status, duration)."""
from __future__ import annotations

import time
from typing import Any

from flask import g, request

from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.access")


def _start_timer() -> None:
    g._request_started = time.perf_counter()


def _log_response(response):
    started = getattr(g, "_request_started", None)
    elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
    LOG.info("%s %s %s %.1f ms", request.method, request.full_path.rstrip("?"), response.status_code, elapsed_ms)
    return response


def register_request_logging(app: Any) -> None:
    if getattr(app, "_request_logging", False):  # idempotent
        return
    app.before_request(_start_timer)
    app.after_request(_log_response)
    setattr(app, "_request_logging", True)


__all__ = ["register_request_logging"]
