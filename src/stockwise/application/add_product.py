"""Application service: Add Product use case."""

from __future__ import annotations

from stockwise.application.validation import require_non_negative, require_text
from stockwise.domain.exceptions import StoreOperationError, ValidationError
from stockwise.domain.model.product import Product
from stockwise.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        quantity: int,
        threshold: int,
        unit_price: float,
        username: str | None = None,
    ) -> Product:
        """Add a new product to stock."""
        product_id = require_text(product_id, "Product ID")
        name = require_text(name, "Product name")
        require_non_negative(quantity, "Quantity")
        require_non_negative(threshold, "Threshold")
        require_non_negative(unit_price, "Unit price")

        if self._product_repo.find_by_id(product_id) is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        product = Product(
            id=product_id,
            name=name,
            quantity=quantity,
            threshold=threshold,
            unit_price=float(unit_price),
            username=username or None,
        )
        if not self._product_repo.add(product):
            raise StoreOperationError(f"Product '{product_id}' could not be saved")
        return product
