"""CLI command that runs the HTTP service."""

from __future__ import annotations

import logging

import click

from fox_shop.infrastructure.config import Settings
from fox_shop.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: FOX_SHOP_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: FOX_SHOP_PORT).")
@click.option("--debug", is_flag=True, default=False, help="Enable Flask debug mode.")
def serve(host: str | None, port: int | None, debug: bool) -> None:
    """Run the products HTTP service."""
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings.db_path)
    host = host or settings.host
    port = port or settings.port
    logger.info("Server is running on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)
