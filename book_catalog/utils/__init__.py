"""Utility helpers."""
from .logging import get_logger
from .paging import parse_page, total_pages

__all__ = [
    "get_logger",
    "parse_page",
    "total_pages",
]
