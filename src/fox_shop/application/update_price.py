"""Application service: Update Price use case."""

from __future__ import annotations

import logging
from typing import Any

from fox_shop.application.dto import ProductDTO
from fox_shop.domain.exceptions import EntityNotFoundError, ValidationError
from fox_shop.domain.model.value_objects import Price
from fox_shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdatePriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, new_price: Any) -> ProductDTO:
        """Set a product's price; records a PriceChange like a partial update."""
        if not new_price:
            raise ValidationError("Price is required")

        price = Price.of(new_price)

        with self._product_repo.transaction():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")
            change = product.update_price(price)
            self._product_repo.save(product)

        logger.info(
            "Product %s price %s -> %s",
            product_id, change.previous_price, change.new_price,
        )
        return ProductDTO.from_domain(product)
