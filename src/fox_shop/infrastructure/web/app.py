"""Flask application factory for the products service."""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from fox_shop.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from fox_shop.infrastructure.config import Settings
from fox_shop.infrastructure.web.routes import products

logger = logging.getLogger(__name__)

_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(db_path: Path | None = None) -> Flask:
    """Build the app; the document path defaults to ``FOX_SHOP_DB``."""
    app = Flask(__name__)
    app.config["FOX_SHOP_DB"] = db_path or Settings.from_env().db_path
    # Keep the stored key order (id, name, price, count) in responses
    app.json.sort_keys = False

    app.register_blueprint(products)

    @app.errorhandler(ValidationError)
    def _bad_request(exc: ValidationError):
        logger.info("Rejected request: %s", exc)
        return str(exc), 400, _TEXT

    @app.errorhandler(EntityNotFoundError)
    def _not_found(exc: EntityNotFoundError):
        return str(exc), 404, _TEXT

    @app.errorhandler(ConflictError)
    def _conflict(exc: ConflictError):
        return str(exc), 409, _TEXT

    # Unmatched routes (e.g. a non-integer ID) and wrong methods answer in plain text too
    @app.errorhandler(404)
    @app.errorhandler(405)
    def _http_error(exc):
        return exc.name, exc.code, _TEXT

    logger.debug("Serving products from %s", app.config["FOX_SHOP_DB"])
    return app
