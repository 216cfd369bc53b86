"""Application service: Show Price History use case (query)."""

from __future__ import annotations

from fox_shop.domain.repository.price_change_repository import PriceChangeRepository
from fox_shop.domain.repository.product_repository import ProductRepository
from fox_shop.domain.service.price_history_service import (
    PriceHistoryService,
    PriceInterval,
)


class ShowPriceHistoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_change_repo: PriceChangeRepository,
    ) -> None:
        self._service = PriceHistoryService(product_repo, price_change_repo)

    def handle(self, product_id: int) -> list[PriceInterval]:
        return self._service.history_for(product_id)
