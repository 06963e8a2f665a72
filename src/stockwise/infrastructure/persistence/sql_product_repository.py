"""SQL-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from stockwise.domain.model.product import Product
from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.infrastructure.persistence.sql_repository import SqlRepository, day_bounds
from stockwise.infrastructure.persistence.tables import ProductRow

logger = logging.getLogger(__name__)


class SqlProductRepository(SqlRepository[Product], ProductRepository):

    row_type = ProductRow

    # --- ProductRepository interface ------------------------------------------

    def find_by_date(self, day: date) -> list[Product]:
        start, end = day_bounds(day)
        return self._query(ProductRow.created_at >= start, ProductRow.created_at < end)

    def find_by_username(self, username: str) -> list[Product]:
        return self._query(ProductRow.username == username)

    def update_quantity(self, product_id: str, expected: int, new_quantity: int) -> bool:
        with self._lock:
            try:
                with self._connection.begin() as session:
                    result = session.execute(
                        update(ProductRow)
                        .where(ProductRow.id == product_id, ProductRow.quantity == expected)
                        .values(quantity=new_quantity)
                    )
                    affected = result.rowcount
            except SQLAlchemyError:
                logger.exception("Stock update of product %r failed", product_id)
                return False
            if affected == 0:
                logger.warning(
                    "Stock of product %r is no longer %d; update skipped", product_id, expected
                )
                return False

            index = self._index_of(product_id)
            if index is not None:
                self._cache[index].quantity = new_quantity
            return True

    # --- Serialization --------------------------------------------------------

    def _to_values(self, product: Product) -> dict[str, Any]:
        return {
            "name": product.name,
            "quantity": product.quantity,
            "threshold": product.threshold,
            "unit_price": product.unit_price,
            "username": product.username,
            "created_at": product.date_added,
        }

    def _to_domain(self, row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name or "",
            quantity=int(row.quantity or 0),
            threshold=int(row.threshold or 0),
            unit_price=float(row.unit_price or 0.0),
            username=row.username,
            date_added=row.created_at or datetime.now(),
        )
