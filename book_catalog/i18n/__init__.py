"""Flask-Babel setup and translation directory registration."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from flask import request
from flask_babel import Babel

from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.i18n")

SUPPORTED_LANGUAGES = ("en",)
DEFAULT_LOCALE = "en"

_APP_ROOT = Path(__file__).resolve().parents[1]
_DEFAULT_TRANSLATION_ROOTS: Sequence[Path] = (_APP_ROOT / "translations",)


def _normalize_paths(paths: Iterable[Path | str]) -> List[str]:
    seen: List[str] = []
    for candidate in paths:
        path = Path(candidate).resolve()
        if not path.is_dir():
            LOG.debug("Translation directory missing; skipping: %s", path)
            continue
        as_str = str(path)
        if as_str not in seen:
            seen.append(as_str)
    return seen


def select_locale() -> str:
    return request.accept_languages.best_match(SUPPORTED_LANGUAGES) or DEFAULT_LOCALE


def configure_translations(app, extra_roots: Iterable[Path | str] | None = None) -> Babel:
    """Initialise Flask-Babel with first-party translation directories first."""
    candidates: List[Path | str] = list(_DEFAULT_TRANSLATION_ROOTS)
    if extra_roots:
        candidates.extend(extra_roots)
    desired = _normalize_paths(candidates)
    app.config.setdefault("BABEL_DEFAULT_LOCALE", DEFAULT_LOCALE)
    if desired:
        app.config["BABEL_TRANSLATION_DIRECTORIES"] = ";".join(desired)
        LOG.info("Registered %s custom translation directories", len(desired))
    return Babel(app, locale_selector=select_locale)


__all__ = ["configure_translations", "select_locale", "SUPPORTED_LANGUAGES"]
