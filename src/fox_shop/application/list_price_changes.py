"""Application service: List Price Changes use case (query).

Returns the raw change log of one product. Unknown products simply
have an empty log.
"""

from __future__ import annotations

from fox_shop.application.dto import PriceChangeDTO
from fox_shop.domain.repository.price_change_repository import PriceChangeRepository


class ListPriceChangesHandler:

    def __init__(self, price_change_repo: PriceChangeRepository) -> None:
        self._price_change_repo = price_change_repo

    def handle(self, product_id: int) -> list[PriceChangeDTO]:
        return [
            PriceChangeDTO.from_domain(change)
            for change in self._price_change_repo.list_for_product(product_id)
        ]
