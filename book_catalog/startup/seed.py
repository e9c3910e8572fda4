#!/usr/bin/env python3
"""Seed the catalog with sample books.

Loads a JSON list of ``{"title", "author", "genre", "year"}`` objects
(default: the packaged ``data/sample_books.json``) and inserts each entry
through the validated store path. Idempotent: entries whose title+author
already exist are skipped.

Exit Codes:
  0 = all ok / or already present
  3 = one or more entries were rejected
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from book_catalog import config as app_config
from book_catalog.db.engine import CatalogDatabase, init_database
from book_catalog.db.models import BookValidationError
from book_catalog.db.repositories import books_repo

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "sample_books.json"


def load_entries(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file must contain a JSON list: {path}")
    return [entry for entry in raw if isinstance(entry, dict)]


def seed_books(db: CatalogDatabase, entries: List[Dict[str, Any]]) -> Dict[str, int]:
    summary = {"created": 0, "skipped": 0, "rejected": 0}
    for entry in entries:
        title = str(entry.get("title") or "").strip()
        author = str(entry.get("author") or "").strip()
        if title and author and books_repo.find_by_title_author(db, title, author):
            summary["skipped"] += 1
            continue
        try:
            books_repo.create_book(db, entry)
        except BookValidationError as exc:
            print(f"[SEED] books WARNING rejected {title!r}: {exc}", file=sys.stderr)
            summary["rejected"] += 1
            continue
        summary["created"] += 1
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the book catalog with sample records.")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_SEED_FILE), help="JSON seed file")
    args = parser.parse_args(argv)

    db = init_database(app_config.database_url())
    try:
        summary = seed_books(db, load_entries(Path(args.path)))
    finally:
        db.dispose()
    print(
        "[SEED] books ok created={created} skipped={skipped} rejected={rejected}".format(**summary)
    )
    return 3 if summary["rejected"] else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
