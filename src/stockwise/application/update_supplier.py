"""Application service: Update Supplier use case."""

from __future__ import annotations

from stockwise.application.validation import require_email, require_text
from stockwise.domain.exceptions import EntityNotFoundError, StoreOperationError
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.repository.supplier_repository import SupplierRepository


class UpdateSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        supplier_id: str,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Supplier:
        """Change the given contact details; fields left as None are kept."""
        supplier = self._supplier_repo.find_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")

        if name is not None:
            supplier.name = require_text(name, "Supplier name")
        if email is not None:
            supplier.email = require_email(email)
        if phone is not None:
            supplier.phone = phone.strip()
        if address is not None:
            supplier.address = address.strip()

        if not self._supplier_repo.update(supplier):
            raise StoreOperationError(f"Supplier '{supplier_id}' could not be updated")
        return supplier
