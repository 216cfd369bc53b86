"""Product aggregate.

A product is the only managed entity. Its price is the one field whose
history matters: every accepted price edit produces a PriceChange that
the repository persists together with the product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fox_shop.domain.exceptions import ValidationError
from fox_shop.domain.model.price_change import PriceChange
from fox_shop.domain.model.value_objects import Price, StockCount


@dataclass
class Product:
    """A product in the catalog.

    Aggregate root; kept as a mutable dataclass because renames, price
    edits and stock adjustments are legitimate in-place mutations.
    """

    id: int
    name: str
    price: Price
    count: StockCount
    _pending_changes: list[PriceChange] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.name = self._checked_name(self.name)

    def rename(self, new_name: str) -> None:
        self.name = self._checked_name(new_name)

    def restock(self, new_count: StockCount) -> None:
        self.count = new_count

    def update_price(
        self, new_price: Price, changed_at: datetime | None = None
    ) -> PriceChange:
        """Change the price and record the edit.

        The previous price is captured before the overwrite. A change is
        recorded even when the new price equals the old one.
        """
        change = PriceChange(
            product_id=self.id,
            product_name=self.name,
            previous_price=self.price,
            new_price=new_price,
            changed_at=changed_at or datetime.now(timezone.utc),
        )
        self.price = new_price
        self._pending_changes.append(change)
        return change

    def collect_price_changes(self) -> list[PriceChange]:
        """Hand over changes recorded since the last save and forget them."""
        changes, self._pending_changes = self._pending_changes, []
        return changes

    @staticmethod
    def _checked_name(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name must be a non-empty string")
        return name
