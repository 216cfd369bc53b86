"""Application service: Update Product use case (partial update)."""

from __future__ import annotations

import logging

from fox_shop.application.dto import ProductDTO, ProductPatch
from fox_shop.domain.exceptions import EntityNotFoundError
from fox_shop.domain.model.value_objects import Price, StockCount
from fox_shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, patch: ProductPatch) -> ProductDTO:
        """Overwrite every provided field of a product.

        The name is applied first so a price change recorded in the same
        request carries the new name. Nothing is saved if any field fails
        validation.
        """
        change = None
        with self._product_repo.transaction():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")

            # Validate values up front so a bad field leaves the product untouched
            new_price = Price.of(patch.price) if patch.price is not None else None
            new_count = StockCount(patch.count) if patch.count is not None else None

            if patch.name is not None:
                product.rename(patch.name)
            if new_price is not None:
                change = product.update_price(new_price)
            if new_count is not None:
                product.restock(new_count)

            self._product_repo.save(product)

        if change is not None:
            logger.info(
                "Product %s price %s -> %s",
                product_id, change.previous_price, change.new_price,
            )
        return ProductDTO.from_domain(product)
