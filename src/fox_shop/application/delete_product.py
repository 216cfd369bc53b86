"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from fox_shop.application.dto import ProductDTO
from fox_shop.domain.exceptions import EntityNotFoundError
from fox_shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        """Remove a product and return it as it was just before removal."""
        with self._product_repo.transaction():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")
            self._product_repo.delete(product_id)

        logger.info("Deleted product %s (%r)", product.id, product.name)
        return ProductDTO.from_domain(product)
