"""Database engine & session management.

``init_database`` is the single startup routine that builds the engine,
creates the schema and returns a ``CatalogDatabase`` handle. The handle is
stored on the Flask app (``app.extensions``) and handed to repositories
explicitly; there is no module-level engine.
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session as SASession, sessionmaker
from sqlalchemy.pool import StaticPool

from book_catalog.db.models import Base
from book_catalog.utils.logging import get_logger

EXTENSION_KEY = "book_catalog.db"

LOG = get_logger("book_catalog.db")


class CatalogDatabase:
    """Engine + session factory for the record store."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory: Callable[[], SASession] = sessionmaker(
            bind=engine, expire_on_commit=False, class_=SASession
        )

    @property
    def url(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

    @contextmanager
    def session(self) -> Iterator[SASession]:
        sess = self._session_factory()
        try:
            yield sess
            sess.commit()
        except Exception:
            sess.rollback()
            raise
        finally:
            sess.close()

    def create_schema(self) -> None:
        """Run metadata.create_all, tolerating a concurrent creator."""
        try:
            Base.metadata.create_all(self.engine)
        except OperationalError as e:  # pragma: no cover - concurrency edge
            if "already exists" in str(e).lower():
                LOG.warning("Schema create encountered existing tables (benign race)")
            else:
                raise

    def drop_schema(self) -> None:
        Base.metadata.drop_all(self.engine)

    def ping(self) -> bool:
        with self.session() as s:
            s.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection so every session sees the same in-memory DB.
            return create_engine(
                url,
                future=True,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        db_path = url.split("sqlite:///", 1)[-1]
        parent_dir = os.path.dirname(os.path.abspath(db_path)) or "."
        os.makedirs(parent_dir, exist_ok=True)
        if not os.access(parent_dir, os.W_OK):
            raise RuntimeError(f"book_catalog DB directory not writable: {parent_dir}")
        return create_engine(url, future=True, connect_args={"check_same_thread": False})
    return create_engine(url, future=True, pool_pre_ping=True)


def init_database(url: str, *, create_schema: bool = True) -> CatalogDatabase:
    engine = _build_engine(url)
    db = CatalogDatabase(engine)
    LOG.info("Initializing book_catalog database engine at %s", db.url)
    if create_schema:
        db.create_schema()
        LOG.debug("book_catalog schema ready")
    return db


def get_database(app) -> CatalogDatabase:
    db: Optional[CatalogDatabase] = app.extensions.get(EXTENSION_KEY)
    if db is None:
        raise RuntimeError("Database not initialized; call init_app first.")
    return db


__all__ = [
    "CatalogDatabase",
    "EXTENSION_KEY",
    "init_database",
    "get_database",
]
