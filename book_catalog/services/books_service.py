"""Book catalog service orchestration.

Sits between the route handlers and ``books_repo``: builds paging windows
and search filters, raises ``BookNotFoundError`` for unknown ids, and
shapes submitted form values for redisplay.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import String, cast, or_
from sqlalchemy.sql.elements import ColumnElement

from book_catalog.config import PAGE_SIZE
from book_catalog.db.engine import CatalogDatabase
from book_catalog.db.models import Book, BookValidationError
from book_catalog.db.models.books import WRITABLE_FIELDS
from book_catalog.db.repositories import books_repo
from book_catalog.services.errors import BookNotFoundError
from book_catalog.services.validation_messages import describe_errors
from book_catalog.utils.logging import get_logger
from book_catalog.utils.paging import parse_page, total_pages, window

LOG = get_logger("book_catalog.services.books")

__all__ = [
    "BookPage",
    "BookForm",
    "list_page",
    "search",
    "build_search_filter",
    "get_book",
    "create_book",
    "update_book",
    "delete_book",
    "form_with_errors",
    "BookNotFoundError",
    "BookValidationError",
]


@dataclass
class BookPage:
    books: List[Book]
    page: int
    total_pages: int
    total: int


@dataclass
class BookForm:
    """Submitted values held for form redisplay."""

    id: Optional[int] = None
    title: str = ""
    author: str = ""
    genre: str = ""
    year: str = ""
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_submission(
        cls,
        values: Mapping[str, Any],
        *,
        book_id: Optional[int] = None,
        errors: Optional[Dict[str, List[str]]] = None,
    ) -> "BookForm":
        raw = {name: values.get(name) for name in WRITABLE_FIELDS}
        return cls(
            id=book_id,
            errors=errors or {},
            **{name: "" if value is None else str(value) for name, value in raw.items()},
        )

    @classmethod
    def from_book(cls, book: Book) -> "BookForm":
        return cls(
            id=book.id,
            title=book.title or "",
            author=book.author or "",
            genre=book.genre or "",
            year="" if book.year is None else str(book.year),
        )


def _submitted_fields(values: Mapping[str, Any]) -> Dict[str, Any]:
    # ``id`` is never taken from the client.
    return {name: values.get(name) for name in WRITABLE_FIELDS}


def list_page(db: CatalogDatabase, raw_page: Any = None, *, limit: int = PAGE_SIZE) -> BookPage:
    page = parse_page(raw_page)
    offset, limit = window(page, limit)
    rows, total = books_repo.find_all(db, offset=offset, limit=limit)
    return BookPage(books=rows, page=page, total_pages=total_pages(total, limit), total=total)


def build_search_filter(query: Optional[str]) -> ColumnElement:
    """Case-insensitive substring match over title/author/genre, plus year.

    ``%`` and ``_`` in ``query`` are matched literally.
    """
    needle = (query or "").strip()
    return or_(
        Book.title.icontains(needle, autoescape=True),
        Book.author.icontains(needle, autoescape=True),
        Book.genre.icontains(needle, autoescape=True),
        cast(Book.year, String).contains(needle, autoescape=True),
    )


def search(db: CatalogDatabase, query: Optional[str]) -> List[Book]:
    rows, total = books_repo.find_all(
        db,
        where=build_search_filter(query),
        order=[Book.year.asc(), Book.id.asc()],
    )
    LOG.debug("Search query=%r matched=%s", query, total)
    return rows


def get_book(db: CatalogDatabase, book_id: int) -> Book:
    book = books_repo.get_book(db, book_id)
    if not book:
        raise BookNotFoundError("book_missing")
    return book


def create_book(db: CatalogDatabase, values: Mapping[str, Any]) -> Book:
    return books_repo.create_book(db, _submitted_fields(values))


def update_book(db: CatalogDatabase, book_id: int, values: Mapping[str, Any]) -> Book:
    book = books_repo.update_book(db, book_id, _submitted_fields(values))
    if not book:
        raise BookNotFoundError("book_missing")
    return book


def delete_book(db: CatalogDatabase, book_id: int) -> None:
    if not books_repo.delete_book(db, book_id):
        raise BookNotFoundError("book_missing")


def form_with_errors(
    values: Mapping[str, Any],
    exc: BookValidationError,
    *,
    book_id: Optional[int] = None,
) -> BookForm:
    """Form redisplay object for a rejected write.

    ``book_id`` is set explicitly because the edited record's id comes from
    the URL, not from the submitted body.
    """
    return BookForm.from_submission(values, book_id=book_id, errors=describe_errors(exc.errors))
