"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fox_shop.infrastructure.config import Settings
from fox_shop.infrastructure.persistence.json_price_change_repository import (
    JsonPriceChangeRepository,
)
from fox_shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from fox_shop.infrastructure.persistence.json_store import JsonStore


@lru_cache(maxsize=None)
def _store_for(db_path: Path) -> JsonStore:
    return JsonStore(db_path)


def store(db_path: Path | None = None) -> JsonStore:
    """One store (and so one lock) per document path in this process."""
    if db_path is None:
        db_path = Settings.from_env().db_path
    return _store_for(db_path.resolve())


def product_repository(db_path: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(store(db_path))


def price_change_repository(db_path: Path | None = None) -> JsonPriceChangeRepository:
    return JsonPriceChangeRepository(store(db_path))
