"""SQL-backed implementation of TransactionRepository.

Only the product's ID is stored with a transaction. The product is
resolved through the product repository on load and again on every read,
so a renamed or restocked product shows its current state.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from stockwise.domain.model.product import Product
from stockwise.domain.model.transaction import Transaction, TransactionType
from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.domain.repository.transaction_repository import TransactionRepository
from stockwise.infrastructure.persistence.connection import ConnectionProvider
from stockwise.infrastructure.persistence.sql_repository import SqlRepository, day_bounds
from stockwise.infrastructure.persistence.tables import TransactionRow


class SqlTransactionRepository(SqlRepository[Transaction], TransactionRepository):

    row_type = TransactionRow

    def __init__(
        self,
        connection: ConnectionProvider,
        product_repo: ProductRepository,
    ) -> None:
        self._product_repo = product_repo
        super().__init__(connection)

    # --- TransactionRepository interface --------------------------------------

    def find_by_product_id(self, product_id: str) -> list[Transaction]:
        return self._query(TransactionRow.product_id == product_id)

    def find_by_date(self, day: date) -> list[Transaction]:
        start, end = day_bounds(day)
        return self._query(TransactionRow.timestamp >= start, TransactionRow.timestamp < end)

    # --- Serialization --------------------------------------------------------

    def _to_values(self, transaction: Transaction) -> dict[str, Any]:
        return {
            "product_id": transaction.product_id,
            "type": transaction.type.value,
            "quantity": transaction.quantity,
            "timestamp": transaction.timestamp,
        }

    def _to_domain(self, row: TransactionRow) -> Transaction:
        product = self._product_repo.find_by_id(row.product_id)
        if product is None:
            product = Product(id=row.product_id, name="Unknown", quantity=0, threshold=0, unit_price=0.0)
        return Transaction(
            id=row.id,
            product=product,
            type=TransactionType(row.type),
            quantity=row.quantity,
            timestamp=row.timestamp or datetime.now(),
        )

    def _refresh(self, transaction: Transaction) -> Transaction:
        current = self._product_repo.find_by_id(transaction.product_id)
        if current is not None:
            transaction.product = current
        return transaction
