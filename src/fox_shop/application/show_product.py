"""Application service: Show Product use case (query).

Looks a product up either by ID or by exact name.
"""

from __future__ import annotations

from fox_shop.application.dto import ProductDTO
from fox_shop.domain.exceptions import EntityNotFoundError
from fox_shop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return ProductDTO.from_domain(product)

    def handle_by_name(self, name: str) -> ProductDTO:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return ProductDTO.from_domain(product)
