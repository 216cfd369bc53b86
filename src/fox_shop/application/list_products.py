"""Application service: List Products use case (query)."""

from __future__ import annotations

from fox_shop.application.dto import ProductDTO
from fox_shop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [ProductDTO.from_domain(p) for p in self._product_repo.list_all()]
