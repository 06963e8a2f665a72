"""Visitor that flags products whose quantity is below their threshold."""

from __future__ import annotations

from stockwise.domain.analytics.inventory_visitor import InventoryVisitor
from stockwise.domain.model.product import Product
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.model.transaction import Transaction


class LowStockDetector(InventoryVisitor):
    """Collects low-stock products in the order they were visited.

    Suppliers and transactions are ignored.
    """

    def __init__(self) -> None:
        self._low_stock: list[Product] = []

    def visit_product(self, product: Product) -> None:
        if product.is_low_stock:
            self._low_stock.append(product)

    def visit_supplier(self, supplier: Supplier) -> None:
        pass

    def visit_transaction(self, transaction: Transaction) -> None:
        pass

    @property
    def low_stock_products(self) -> list[Product]:
        return list(self._low_stock)
