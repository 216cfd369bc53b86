"""Abstract read-side repository for PriceChange records.

Records are written only through ProductRepository.save, so this
interface has no mutators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fox_shop.domain.model.price_change import PriceChange


class PriceChangeRepository(ABC):

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[PriceChange]:
        """Return every change recorded for a product, in stored order."""
