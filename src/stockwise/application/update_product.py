"""Application service: Update Product use case."""

from __future__ import annotations

from stockwise.application.validation import require_non_negative, require_text
from stockwise.domain.exceptions import EntityNotFoundError, StoreOperationError
from stockwise.domain.model.product import Product
from stockwise.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        quantity: int | None = None,
        threshold: int | None = None,
        unit_price: float | None = None,
        username: str | None = None,
    ) -> Product:
        """Change the given fields of a product; fields left as None are kept.

        Recorded transactions are not touched.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            product.name = require_text(name, "Product name")
        if quantity is not None:
            require_non_negative(quantity, "Quantity")
            product.quantity = quantity
        if threshold is not None:
            require_non_negative(threshold, "Threshold")
            product.threshold = threshold
        if unit_price is not None:
            require_non_negative(unit_price, "Unit price")
            product.unit_price = float(unit_price)
        if username is not None:
            product.username = username or None

        if not self._product_repo.update(product):
            raise StoreOperationError(f"Product '{product_id}' could not be updated")
        return product
