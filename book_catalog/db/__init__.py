"""Database layer root."""

from .engine import (
    CatalogDatabase,
    init_database,
    get_database,
)

__all__ = [
    "CatalogDatabase",
    "init_database",
    "get_database",
]
