"""Offset/limit helpers for paginated listings."""
from __future__ import annotations

import math
from typing import Any, Tuple

# Offsets are capped below the 64-bit SQL integer limit.
MAX_OFFSET = 2**62


def parse_page(raw: Any) -> int:
    """Return a 1-based page number; anything unparsable or < 1 becomes 1."""
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def window(page: int, limit: int) -> Tuple[int, int]:
    """(offset, limit) for ``page``; the offset is capped at ``MAX_OFFSET``."""
    return min((page - 1) * limit, MAX_OFFSET), limit


def total_pages(total: int, limit: int) -> int:
    if total <= 0 or limit <= 0:
        return 0
    return math.ceil(total / limit)


__all__ = ["MAX_OFFSET", "parse_page", "window", "total_pages"]
