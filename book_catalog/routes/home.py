"""Site root: sends visitors to the book listing."""
from __future__ import annotations

from typing import Any

from flask import Blueprint, redirect, url_for

from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.routes.home")

bp = Blueprint("home", __name__)


@bp.route("/", methods=["GET"])
def index():
    return redirect(url_for("books.index"))


def register_home(app: Any) -> None:
    if getattr(app, "_home_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_home_bp", bp)
    LOG.debug("home blueprint registered")


__all__ = ["register_home", "bp"]
