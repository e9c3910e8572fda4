"""Map store validation codes to human-readable, translatable messages."""
from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from flask_babel import lazy_gettext as _l

from book_catalog.db.models.books import YEAR_MAX, YEAR_MIN

_ERROR_MESSAGES = {
    "title_required": _l("Title is required."),
    "title_too_long": _l("Title is too long."),
    "author_required": _l("Author is required."),
    "author_too_long": _l("Author is too long."),
    "genre_too_long": _l("Genre is too long."),
    "year_required": _l("Year is required."),
    "year_invalid": _l("Year must be a whole number."),
    "year_out_of_range": _l(
        "Year must be a four-digit year between %(low)s and %(high)s.", low=YEAR_MIN, high=YEAR_MAX
    ),
    "constraint_violation": _l("The book could not be saved."),
}
_FALLBACK = _l("Invalid value.")


def message_for(code: str) -> str:
    return str(_ERROR_MESSAGES.get(code, _FALLBACK))


def describe_errors(errors: Mapping[str, Sequence[str]]) -> Dict[str, List[str]]:
    """Translate ``{field: [code, ...]}`` into ``{field: [message, ...]}``."""
    return {field: [message_for(code) for code in codes] for field, codes in errors.items()}


__all__ = ["message_for", "describe_errors"]
