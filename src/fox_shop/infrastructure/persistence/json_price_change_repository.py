"""JSON-document-backed implementation of PriceChangeRepository.

Also owns the on-disk shape of a change record, which the product
repository reuses when it appends new changes.
"""

from __future__ import annotations

from decimal import Decimal

from fox_shop.domain.model.price_change import (
    PriceChange,
    format_timestamp,
    parse_timestamp,
)
from fox_shop.domain.model.value_objects import Price
from fox_shop.domain.repository.price_change_repository import PriceChangeRepository
from fox_shop.infrastructure.persistence.json_store import JsonStore


class JsonPriceChangeRepository(PriceChangeRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    def list_for_product(self, product_id: int) -> list[PriceChange]:
        with self._store.reading() as document:
            return [
                change_from_raw(raw)
                for raw in document["changes"]
                if raw["productId"] == product_id
            ]


# --- Serialization ------------------------------------------------------------


def change_to_raw(change: PriceChange) -> dict:
    return {
        "productId": change.product_id,
        "productName": change.product_name,
        "previousPrice": change.previous_price.to_number(),
        "newPrice": change.new_price.to_number(),
        "changedAt": format_timestamp(change.changed_at),
    }


def change_from_raw(raw: dict) -> PriceChange:
    return PriceChange(
        product_id=raw["productId"],
        product_name=raw["productName"],
        previous_price=Price(Decimal(str(raw["previousPrice"]))),
        new_price=Price(Decimal(str(raw["newPrice"]))),
        changed_at=parse_timestamp(raw["changedAt"]),
    )
