"""Development server entrypoint: ``python -m book_catalog`` or ``book-catalog``.

Production deployments should point a WSGI server at
``book_catalog:create_app()`` instead.
"""
from __future__ import annotations

from book_catalog import config as app_config
from book_catalog.startup.wiring import create_app
from book_catalog.utils.logging import get_logger

LOG = get_logger("book_catalog.main")


def main() -> int:  # pragma: no cover (thin wrapper)
    app = create_app()
    port = app_config.server_port()
    LOG.info("The application is running on localhost:%s", port)
    app.run(host="0.0.0.0", port=port, debug=app_config.is_development())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
