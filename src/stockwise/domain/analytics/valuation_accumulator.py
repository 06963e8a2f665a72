"""Visitor that totals the stock value of every visited product."""

from __future__ import annotations

import math

from stockwise.domain.analytics.inventory_visitor import InventoryVisitor
from stockwise.domain.model.product import Product
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.model.transaction import Transaction


class ValuationAccumulator(InventoryVisitor):
    """Sums ``quantity * unit_price`` over visited products.

    Line values are summed with ``math.fsum`` so the total does not depend
    on visitation order.
    """

    def __init__(self) -> None:
        self._line_values: list[float] = []

    def visit_product(self, product: Product) -> None:
        self._line_values.append(product.total_value)

    def visit_supplier(self, supplier: Supplier) -> None:
        pass

    def visit_transaction(self, transaction: Transaction) -> None:
        pass

    @property
    def total_value(self) -> float:
        return math.fsum(self._line_values)
