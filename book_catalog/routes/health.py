"""Lightweight health probe endpoint.

Exposes /healthz returning a fast 200 for container / LB health checks.
"""
from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from book_catalog.db.engine import get_database
from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.routes.health")

bp = Blueprint("health", __name__)


@bp.route("/healthz", methods=["GET"])  # simple, cache-friendly
def healthz():
    # Trivial DB round-trip to increase confidence.
    db_ok = True
    try:
        get_database(current_app).ping()
    except SQLAlchemyError as exc:
        db_ok = False
        LOG.warning("Health DB probe failed: %s", exc)
    status_code = 200 if db_ok else 500
    return jsonify({"status": "ok" if db_ok else "degraded", "db": db_ok}), status_code


def register_health(app: Any) -> None:
    if getattr(app, "_health_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_health_bp", bp)
    LOG.debug("health blueprint registered")


__all__ = ["register_health"]
