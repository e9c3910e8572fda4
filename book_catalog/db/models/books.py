"""ORM model for the ``books`` table plus write-side validation."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

TITLE_MAX = 255
AUTHOR_MAX = 255
GENRE_MAX = 100
YEAR_MIN = 1000
YEAR_MAX = 9999
# Largest id a 64-bit INTEGER primary key can hold.
MAX_BOOK_ID = 2**63 - 1
WRITABLE_FIELDS = ("title", "author", "genre", "year")

# Key used for errors that do not belong to a single field.
NON_FIELD_KEY = "__all__"

ValidationErrors = Dict[str, List[str]]


class BookValidationError(ValueError):
    """Raised by the store when a write is rejected.

    ``errors`` maps field name to a list of error codes, e.g.
    ``{"title": ["title_required"]}``.
    """

    def __init__(self, errors: ValidationErrors):
        self.errors = {field: list(codes) for field, codes in errors.items()}
        super().__init__(", ".join(code for codes in self.errors.values() for code in codes))


class Book(Base):
    """A catalogued book. ``id`` is assigned by the database only."""

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TITLE_MAX), nullable=False)
    author = Column(String(AUTHOR_MAX), nullable=False)
    genre = Column(String(GENRE_MAX), nullable=True)
    year = Column(Integer, nullable=False, index=True)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "year": self.year,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Book id={self.id} title={self.title!r} year={self.year}>"


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _check_text(
    errors: ValidationErrors,
    field: str,
    value: str,
    max_len: int,
    *,
    required: bool,
) -> None:
    if required and not value:
        errors.setdefault(field, []).append(f"{field}_required")
    elif len(value) > max_len:
        errors.setdefault(field, []).append(f"{field}_too_long")


def _check_year(errors: ValidationErrors, raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        errors.setdefault("year", []).append("year_invalid")
        return None
    if isinstance(raw, int):
        year = raw
    else:
        text = _clean_text(raw)
        if not text:
            errors.setdefault("year", []).append("year_required")
            return None
        try:
            year = int(text)
        except ValueError:
            errors.setdefault("year", []).append("year_invalid")
            return None
    if not YEAR_MIN <= year <= YEAR_MAX:
        errors.setdefault("year", []).append("year_out_of_range")
        return None
    return year


def validate_book_fields(fields: Mapping[str, Any]) -> Tuple[Dict[str, Any], ValidationErrors]:
    """Normalize submitted values and collect every field error at once.

    Only ``WRITABLE_FIELDS`` are considered; an ``id`` in ``fields`` is
    ignored. Returns ``(clean_values, errors)``.
    """
    errors: ValidationErrors = {}
    title = _clean_text(fields.get("title"))
    author = _clean_text(fields.get("author"))
    genre = _clean_text(fields.get("genre"))
    _check_text(errors, "title", title, TITLE_MAX, required=True)
    _check_text(errors, "author", author, AUTHOR_MAX, required=True)
    _check_text(errors, "genre", genre, GENRE_MAX, required=False)
    year = _check_year(errors, fields.get("year"))
    clean = {
        "title": title,
        "author": author,
        "genre": genre or None,
        "year": year,
    }
    return clean, errors


__all__ = [
    "Base",
    "Book",
    "BookValidationError",
    "ValidationErrors",
    "NON_FIELD_KEY",
    "WRITABLE_FIELDS",
    "YEAR_MIN",
    "YEAR_MAX",
    "MAX_BOOK_ID",
    "validate_book_fields",
]
