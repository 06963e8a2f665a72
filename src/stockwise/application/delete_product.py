"""Application service: Delete Product use case.

The store refuses to delete a product that still has recorded
transactions; that refusal surfaces here as StoreOperationError.
"""

from __future__ import annotations

from stockwise.domain.exceptions import EntityNotFoundError, StoreOperationError
from stockwise.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.find_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if not self._product_repo.delete(product_id):
            raise StoreOperationError(
                f"Product '{product_id}' could not be deleted "
                f"(it may still have recorded transactions)"
            )
