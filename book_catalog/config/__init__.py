"""Application configuration accessors.

Centralizes environment variable parsing & defaults. Callers go through
these helpers instead of reading ``os.environ`` directly so tests can
override values with ``monkeypatch.setenv``.
"""
from __future__ import annotations

import os

DEFAULT_DB_PATH = "book_catalog.db"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PORT = 3000
DEFAULT_SECRET_KEY = "book-catalog-dev-secret"
PAGE_SIZE = 10
_TRUE = {"1", "true", "yes", "on"}
_DEVELOPMENT = {"development", "dev"}


def _raw_env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def env_bool(name: str, default: bool = False) -> bool:
    raw = _raw_env(name, str(default).lower())
    if raw is None:
        return default
    return raw.lower() in _TRUE


def get_db_path() -> str:
    return _raw_env("BOOK_CATALOG_DB_PATH", DEFAULT_DB_PATH)  # type: ignore[return-value]


def database_url() -> str:
    """SQLAlchemy URL for the record store.

    ``BOOK_CATALOG_DATABASE_URL`` wins when set; otherwise a SQLite file at
    ``get_db_path()`` is used (``:memory:`` is passed through as-is).
    """
    explicit = _raw_env("BOOK_CATALOG_DATABASE_URL")
    if explicit and explicit.strip():
        return explicit.strip()
    path = get_db_path()
    if path == ":memory:":
        return "sqlite:///:memory:"
    return f"sqlite:///{path}"


def environment() -> str:
    return (_raw_env("BOOK_CATALOG_ENV", "production") or "production").strip().lower()


def is_development(env: str | None = None) -> bool:
    """True for ``development``/``dev``; ``env`` defaults to ``BOOK_CATALOG_ENV``."""
    value = environment() if env is None else env.strip().lower()
    return value in _DEVELOPMENT


def log_level_name() -> str:
    return _raw_env("BOOK_CATALOG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()  # type: ignore[union-attr]


def secret_key() -> str:
    value = _raw_env("BOOK_CATALOG_SECRET_KEY")
    if value is None or not value.strip():
        return DEFAULT_SECRET_KEY
    return value.strip()


def csrf_enabled() -> bool:
    return env_bool("BOOK_CATALOG_CSRF_ENABLED", default=True)


def server_port() -> int:
    raw = _raw_env("PORT")
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def flask_settings() -> dict:
    """Flask ``app.config`` mapping derived from the environment."""
    return {
        "SECRET_KEY": secret_key(),
        "DATABASE_URL": database_url(),
        "BOOK_CATALOG_ENV": environment(),
        "WTF_CSRF_ENABLED": csrf_enabled(),
        "PAGE_SIZE": PAGE_SIZE,
    }


__all__ = [
    "PAGE_SIZE",
    "env_bool",
    "get_db_path",
    "database_url",
    "environment",
    "is_development",
    "log_level_name",
    "secret_key",
    "csrf_enabled",
    "server_port",
    "flask_settings",
]
