"""Application service: link a product to the supplier that provides it.

The link lives on the cached supplier only and is gone after a reload.
"""

from __future__ import annotations

from stockwise.domain.exceptions import EntityNotFoundError, StoreOperationError
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.domain.repository.supplier_repository import SupplierRepository


class SupplyProductHandler:

    def __init__(
        self,
        supplier_repo: SupplierRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._supplier_repo = supplier_repo
        self._product_repo = product_repo

    def handle(self, supplier_id: str, product_id: str) -> Supplier:
        supplier = self._supplier_repo.find_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if any(p.id == product.id for p in supplier.supplied_products):
            return supplier
        supplier.add_product(product)
        if not self._supplier_repo.update(supplier):
            raise StoreOperationError(f"Supplier '{supplier_id}' could not be updated")
        return supplier
