"""Abstract repository for the Product entity."""

from __future__ import annotations

from abc import abstractmethod
from datetime import date

from stockwise.domain.model.product import Product
from stockwise.domain.repository.repository import Repository


class ProductRepository(Repository[Product]):

    @abstractmethod
    def find_by_date(self, day: date) -> list[Product]:
        """Return products added on ``day``, read from the store."""

    @abstractmethod
    def find_by_username(self, username: str) -> list[Product]:
        """Return products owned by ``username``, read from the store."""

    @abstractmethod
    def update_quantity(self, product_id: str, expected: int, new_quantity: int) -> bool:
        """Set a product's stock only if it still holds ``expected``.

        Returns False when the product is missing, its stock has changed
        since it was read, or the store rejects the write.
        """
