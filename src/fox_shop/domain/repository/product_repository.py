"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from fox_shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Scope a read-modify-write so no other caller interleaves.

        Calls made inside the block see one consistent state, and their
        writes become visible together when it exits without raising.
        """

    @abstractmethod
    def next_id(self) -> int:
        """Generate an ID that no product or price change has used yet."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return the first product with exactly this name, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product; ConflictError if its ID is taken."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product.

        Price changes recorded on the product since it was loaded are
        appended in the same write.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Its price changes are kept."""
