"""Application service: Add Supplier use case."""

from __future__ import annotations

from stockwise.application.validation import require_email, require_text
from stockwise.domain.exceptions import StoreOperationError, ValidationError
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.repository.supplier_repository import SupplierRepository


class AddSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        supplier_id: str,
        name: str,
        email: str,
        phone: str = "",
        address: str = "",
    ) -> Supplier:
        supplier_id = require_text(supplier_id, "Supplier ID")
        name = require_text(name, "Supplier name")
        email = require_email(email)

        if self._supplier_repo.find_by_id(supplier_id) is not None:
            raise ValidationError(f"Supplier '{supplier_id}' already exists")

        supplier = Supplier(
            id=supplier_id,
            name=name,
            email=email,
            phone=phone.strip(),
            address=address.strip(),
        )
        if not self._supplier_repo.add(supplier):
            raise StoreOperationError(f"Supplier '{supplier_id}' could not be saved")
        return supplier
