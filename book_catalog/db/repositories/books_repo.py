"""Repository helpers for book records."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql.elements import ColumnElement

from book_catalog.db.engine import CatalogDatabase
from book_catalog.db.models.books import (
    MAX_BOOK_ID,
    NON_FIELD_KEY,
    Book,
    BookValidationError,
    validate_book_fields,
)
from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.db.books_repo")


def _validated(fields: Mapping[str, Any]) -> dict:
    clean, errors = validate_book_fields(fields)
    if errors:
        raise BookValidationError(errors)
    return clean


def _storable_id(book_id: int) -> bool:
    return 1 <= book_id <= MAX_BOOK_ID


def find_all(
    db: CatalogDatabase,
    where: Optional[ColumnElement] = None,
    order: Optional[Iterable[Any]] = None,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> Tuple[List[Book], int]:
    """Return ``(rows, total)`` where ``total`` ignores offset/limit."""
    order_by = list(order) if order is not None else [Book.id.asc()]
    with db.session() as session:
        count_stmt = select(func.count()).select_from(Book)
        rows_stmt = select(Book).order_by(*order_by)
        if where is not None:
            count_stmt = count_stmt.where(where)
            rows_stmt = rows_stmt.where(where)
        if offset:
            rows_stmt = rows_stmt.offset(offset)
        if limit is not None:
            rows_stmt = rows_stmt.limit(limit)
        total = session.execute(count_stmt).scalar_one()
        rows = list(session.execute(rows_stmt).scalars().all())
        return rows, int(total)


def count_books(db: CatalogDatabase) -> int:
    with db.session() as session:
        return int(session.execute(select(func.count()).select_from(Book)).scalar_one())


def get_book(db: CatalogDatabase, book_id: int) -> Optional[Book]:
    if not _storable_id(book_id):
        return None
    with db.session() as session:
        return session.get(Book, book_id)


def find_by_title_author(db: CatalogDatabase, title: str, author: str) -> Optional[Book]:
    with db.session() as session:
        return (
            session.execute(
                select(Book)
                .where(Book.title == title, Book.author == author)
                .order_by(Book.id.asc())
                .limit(1)
            )
            .scalars()
            .first()
        )


def create_book(db: CatalogDatabase, fields: Mapping[str, Any]) -> Book:
    book = Book(**_validated(fields))
    try:
        with db.session() as session:
            session.add(book)
            session.flush()
    except IntegrityError as exc:
        raise BookValidationError({NON_FIELD_KEY: ["constraint_violation"]}) from exc
    LOG.info("Created book id=%s title=%s", book.id, book.title)
    return book


def update_book(db: CatalogDatabase, book_id: int, fields: Mapping[str, Any]) -> Optional[Book]:
    """Apply validated ``fields``; ``None`` when ``book_id`` is unknown.

    Validation runs only after the record is found, so an unknown id is
    reported as missing even when the submitted values are invalid.
    """
    if not _storable_id(book_id):
        return None
    try:
        with db.session() as session:
            book = session.get(Book, book_id)
            if not book:
                return None
            for key, value in _validated(fields).items():
                setattr(book, key, value)
    except IntegrityError as exc:
        raise BookValidationError({NON_FIELD_KEY: ["constraint_violation"]}) from exc
    LOG.info("Updated book id=%s", book_id)
    return book


def delete_book(db: CatalogDatabase, book_id: int) -> bool:
    if not _storable_id(book_id):
        return False
    with db.session() as session:
        book = session.get(Book, book_id)
        if not book:
            return False
        session.delete(book)
    LOG.info("Deleted book id=%s", book_id)
    return True


__all__ = [
    "find_all",
    "count_books",
    "get_book",
    "find_by_title_author",
    "create_book",
    "update_book",
    "delete_book",
]
