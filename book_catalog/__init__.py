"""Book catalog: a server-rendered Flask application for managing book records.

Layers: ``db`` (SQLAlchemy record store), ``services`` (paging, search,
validation message mapping), ``routes`` (blueprints + error pipeline),
``startup`` (wiring and seeding).
"""


def create_app(overrides=None):
    """Build a configured Flask app (see ``book_catalog.startup.wiring``)."""
    from book_catalog.startup.wiring import create_app as _create_app

    return _create_app(overrides)


__all__ = [
    "create_app",
]
