"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Any

from fox_shop.application.dto import ProductDTO
from fox_shop.domain.exceptions import ValidationError
from fox_shop.domain.model.product import Product
from fox_shop.domain.model.value_objects import Price, StockCount
from fox_shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: Any, price: Any, count: Any) -> ProductDTO:
        """Add a new product to the catalog.

        All three fields must be present and truthy, so a zero count is
        rejected here even though a product may later be restocked to zero.
        """
        if not name or not price or not count:
            raise ValidationError("Name, price and count are required")

        new_price, new_count = Price.of(price), StockCount(count)

        # ID allocation and append share one lock hold; concurrent creates never collide
        with self._product_repo.transaction():
            product = Product(
                id=self._product_repo.next_id(),
                name=name,
                price=new_price,
                count=new_count,
            )
            self._product_repo.add(product)
        logger.info("Created product %s (%r)", product.id, product.name)
        return ProductDTO.from_domain(product)
