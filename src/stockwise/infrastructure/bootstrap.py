"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. One AppContext is built
at startup and handed to every consumer; there are no module-level
repositories.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.domain.repository.supplier_repository import SupplierRepository
from stockwise.domain.repository.transaction_repository import TransactionRepository
from stockwise.infrastructure.config import StoreSettings
from stockwise.infrastructure.persistence.connection import ConnectionProvider
from stockwise.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from stockwise.infrastructure.persistence.sql_supplier_repository import (
    SqlSupplierRepository,
)
from stockwise.infrastructure.persistence.sql_transaction_repository import (
    SqlTransactionRepository,
)


@dataclass
class AppContext:
    connection: ConnectionProvider
    product_repo: ProductRepository
    supplier_repo: SupplierRepository
    transaction_repo: TransactionRepository

    def close(self) -> None:
        self.connection.close()


def build_context(settings: StoreSettings | None = None) -> AppContext:
    """Open the store and load every repository.

    Raises ConfigurationError if the store credential is missing.
    """
    connection = ConnectionProvider.from_settings(settings or StoreSettings())
    product_repo = SqlProductRepository(connection)
    return AppContext(
        connection=connection,
        product_repo=product_repo,
        supplier_repo=SqlSupplierRepository(connection),
        transaction_repo=SqlTransactionRepository(connection, product_repo),
    )
