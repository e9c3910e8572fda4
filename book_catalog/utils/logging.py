"""Logging for the book catalog.

Every module logs through a child of the ``book_catalog`` logger. The stream
handler and level (``book_catalog.config.log_level_name()``) are attached
once, to that package logger; children propagate to it.
"""
from __future__ import annotations

import logging
import threading

from book_catalog import config as app_config

ROOT_NAME = "book_catalog"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_LOCK = threading.Lock()
_configured = False


def _configure_root() -> logging.Logger:
    global _configured
    root = logging.getLogger(ROOT_NAME)
    if _configured:
        return root
    with _LOCK:
        if not _configured:
            level = getattr(logging, app_config.log_level_name(), logging.INFO)
            root.setLevel(level)
            if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                root.addHandler(handler)
            root.propagate = False
            _configured = True
    return root


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    """Logger ``name``, nested under ``book_catalog`` when it is not already."""
    root = _configure_root()
    if name == ROOT_NAME:
        return root
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger"]
