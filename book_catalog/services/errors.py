"""Error types carrying an HTTP status for the error pipeline."""
from __future__ import annotations

from typing import Optional


class CatalogError(RuntimeError):
    """Base for request errors that map to a specific HTTP status."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        super().__init__(message or self.code)
        if status_code is not None:
            self.status_code = status_code


class BookNotFoundError(CatalogError):
    """Raised when a book id cannot be located."""

    status_code = 404
    code = "book_missing"


__all__ = ["CatalogError", "BookNotFoundError"]
