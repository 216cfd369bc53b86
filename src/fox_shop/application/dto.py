"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world. Output DTOs
know their JSON shape, which is also the shape of the stored document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fox_shop.domain.model.price_change import PriceChange
from fox_shop.domain.model.product import Product


@dataclass(frozen=True)
class ProductPatch:
    """Input: fields to overwrite on an existing product. None means untouched."""

    name: Any = None
    price: Any = None
    count: Any = None

    @classmethod
    def from_mapping(cls, body: Any) -> ProductPatch:
        if not isinstance(body, dict):
            return cls()
        return cls(
            name=body.get("name"),
            price=body.get("price"),
            count=body.get("count"),
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to clients."""

    id: int
    name: str
    price: int | float
    count: int

    @classmethod
    def from_domain(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price.to_number(),
            count=product.count.value,
        )

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price, "count": self.count}


@dataclass(frozen=True)
class PriceChangeDTO:
    """Output: one entry of the change log."""

    product_id: int
    product_name: str
    previous_price: int | float
    new_price: int | float
    changed_at: str

    @classmethod
    def from_domain(cls, change: PriceChange) -> PriceChangeDTO:
        return cls(
            product_id=change.product_id,
            product_name=change.product_name,
            previous_price=change.previous_price.to_number(),
            new_price=change.new_price.to_number(),
            changed_at=change.changed_at_label,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "previousPrice": self.previous_price,
            "newPrice": self.new_price,
            "changedAt": self.changed_at,
        }
