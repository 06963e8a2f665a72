"""Visitor that builds one line of text per visited entity."""

from __future__ import annotations

from stockwise.domain.analytics.inventory_visitor import InventoryVisitor
from stockwise.domain.model.product import Product
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.model.transaction import Transaction

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class SummaryCollector(InventoryVisitor):
    """Keeps a separate, visitation-ordered list of summaries per entity type."""

    def __init__(self) -> None:
        self._product_summaries: list[str] = []
        self._supplier_summaries: list[str] = []
        self._transaction_summaries: list[str] = []

    # --- InventoryVisitor interface -------------------------------------------

    def visit_product(self, product: Product) -> None:
        owner = product.username or "-"
        self._product_summaries.append(
            f"Product {product.id}: {product.name} "
            f"qty={product.quantity} threshold={product.threshold} "
            f"unit_price={product.unit_price:.2f} owner={owner}"
        )

    def visit_supplier(self, supplier: Supplier) -> None:
        line = (
            f"Supplier {supplier.id}: {supplier.name} "
            f"<{supplier.email}> {supplier.phone}, {supplier.address}"
        )
        if supplier.supplied_products:
            names = ", ".join(p.name for p in supplier.supplied_products)
            line += f" supplies [{names}]"
        self._supplier_summaries.append(line)

    def visit_transaction(self, transaction: Transaction) -> None:
        self._transaction_summaries.append(
            f"Transaction {transaction.id}: {transaction.type.value} "
            f"{transaction.quantity} x {transaction.product.name} "
            f"({transaction.product_id}) at "
            f"{transaction.timestamp.strftime(_TIMESTAMP_FORMAT)}"
        )

    # --- Results --------------------------------------------------------------

    @property
    def product_summaries(self) -> list[str]:
        return list(self._product_summaries)

    @property
    def supplier_summaries(self) -> list[str]:
        return list(self._supplier_summaries)

    @property
    def transaction_summaries(self) -> list[str]:
        return list(self._transaction_summaries)
