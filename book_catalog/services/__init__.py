"""Service exports."""

from .books_service import (
    BookForm,
    BookPage,
    list_page,
    search,
    get_book,
    create_book,
    update_book,
    delete_book,
    form_with_errors,
    BookValidationError,
)
from .errors import CatalogError, BookNotFoundError
from . import validation_messages

__all__ = [
    "BookForm",
    "BookPage",
    "list_page",
    "search",
    "get_book",
    "create_book",
    "update_book",
    "delete_book",
    "form_with_errors",
    "BookValidationError",
    "CatalogError",
    "BookNotFoundError",
    "validation_messages",
]
