"""ORM models aggregate exports."""
from .books import (  # noqa: F401
	Base,
	Book,
	BookValidationError,
	NON_FIELD_KEY,
	validate_book_fields,
)

__all__ = [
	"Base",
	"Book",
	"BookValidationError",
	"NON_FIELD_KEY",
	"validate_book_fields",
]
