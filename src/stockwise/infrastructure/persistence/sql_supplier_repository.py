"""SQL-backed implementation of SupplierRepository."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from stockwise.domain.model.supplier import Supplier
from stockwise.domain.repository.supplier_repository import SupplierRepository
from stockwise.infrastructure.persistence.sql_repository import SqlRepository, day_bounds
from stockwise.infrastructure.persistence.tables import SupplierRow


class SqlSupplierRepository(SqlRepository[Supplier], SupplierRepository):

    row_type = SupplierRow

    def find_by_date(self, day: date) -> list[Supplier]:
        start, end = day_bounds(day)
        return self._query(SupplierRow.created_at >= start, SupplierRow.created_at < end)

    # supplied_products is not persisted; a reloaded supplier starts empty.

    def _to_values(self, supplier: Supplier) -> dict[str, Any]:
        return {
            "name": supplier.name,
            "email": supplier.email,
            "phone": supplier.phone,
            "address": supplier.address,
            "created_at": supplier.date_added,
        }

    def _to_domain(self, row: SupplierRow) -> Supplier:
        return Supplier(
            id=row.id,
            name=row.name or "",
            email=row.email or "",
            phone=row.phone or "",
            address=row.address or "",
            date_added=row.created_at or datetime.now(),
        )
