"""Domain service: Price History.

Folds the PriceChange records of one product into a chronological list
of labelled price intervals. It is a reporting view; the change log
stays the source of truth.

The output is a list of single-key mappings, e.g.::

    [{"Initial price": 15},
     {"2025-02-10T00:23:05.681Z - 2025-02-10T00:25:30.163Z": 10},
     {"2025-02-10T00:25:30.163Z - Present": 20}]
"""

from __future__ import annotations

from fox_shop.domain.exceptions import EntityNotFoundError
from fox_shop.domain.model.price_change import PriceChange
from fox_shop.domain.repository.price_change_repository import PriceChangeRepository
from fox_shop.domain.repository.product_repository import ProductRepository

INITIAL_PRICE = "Initial price"
ACTUAL_PRICE = "Actual price"
PRESENT = "Present"

PriceInterval = dict[str, int | float]


class PriceHistoryService:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_change_repo: PriceChangeRepository,
    ) -> None:
        self._product_repo = product_repo
        self._price_change_repo = price_change_repo

    def history_for(self, product_id: int) -> list[PriceInterval]:
        """Build the price history of a product.

        Without recorded changes the history is the current price alone,
        which requires the product to exist. With changes the history is
        derived from the log only, so a deleted product keeps its history.
        """
        changes = self._price_change_repo.list_for_product(product_id)
        if not changes:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("The product was not found")
            return [{ACTUAL_PRICE: product.price.to_number()}]
        return build_intervals(changes)


def build_intervals(changes: list[PriceChange]) -> list[PriceInterval]:
    """Sort changes by time and label each price with the span it held."""
    # sorted() is stable: changes sharing a timestamp keep stored order
    ordered = sorted(changes, key=lambda change: change.changed_at)

    history: list[PriceInterval] = [
        {INITIAL_PRICE: ordered[0].previous_price.to_number()}
    ]
    for current, following in zip(ordered, ordered[1:] + [None]):
        until = following.changed_at_label if following is not None else PRESENT
        label = f"{current.changed_at_label} - {until}"
        history.append({label: current.new_price.to_number()})
    return history
