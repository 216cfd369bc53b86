"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from fox_shop.domain.exceptions import ConflictError
from fox_shop.domain.model.product import Product
from fox_shop.domain.model.value_objects import Price, StockCount
from fox_shop.domain.repository.product_repository import ProductRepository
from fox_shop.infrastructure.persistence.json_price_change_repository import (
    change_to_raw,
)
from fox_shop.infrastructure.persistence.json_store import JsonStore


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[None]:
        # Nested store scopes share this one's working copy and flush
        with self._store.writing():
            yield

    def next_id(self) -> int:
        # Ids owned by deleted products still appear in the change log
        with self._store.reading() as document:
            used = [p["id"] for p in document["products"]]
            used += [c["productId"] for c in document["changes"]]
        if not used:
            return 1
        return max(used) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        with self._store.reading() as document:
            for raw in document["products"]:
                if raw["id"] == product_id:
                    return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        with self._store.reading() as document:
            for raw in document["products"]:
                if raw["name"] == name:
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        with self._store.reading() as document:
            return [self._to_domain(raw) for raw in document["products"]]

    def add(self, product: Product) -> None:
        with self._store.writing() as document:
            if any(raw["id"] == product.id for raw in document["products"]):
                raise ConflictError(f"Product with ID {product.id} already exists")
            document["products"].append(self._to_raw(product))
            document["changes"].extend(
                change_to_raw(change) for change in product.collect_price_changes()
            )

    def save(self, product: Product) -> None:
        with self._store.writing() as document:
            records = document["products"]

            # Upsert: replace in place to keep insertion order, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(product))

            document["changes"].extend(
                change_to_raw(change) for change in product.collect_price_changes()
            )

    def delete(self, product_id: int) -> None:
        with self._store.writing() as document:
            document["products"] = [
                raw for raw in document["products"] if raw["id"] != product_id
            ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.to_number(),
            "count": product.count.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Price(Decimal(str(raw["price"]))),
            count=StockCount(raw["count"]),
        )
