"""Transaction entity: a single stock movement for one product.

Recording a transaction does not change the product by itself. The
caller computes the effect with ``TransactionType.stock_delta`` and
updates the product through its own repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from stockwise.domain.model.product import Product

if TYPE_CHECKING:
    from stockwise.domain.analytics.inventory_visitor import InventoryVisitor


class TransactionType(Enum):
    SALE = "SALE"
    RESTOCK = "RESTOCK"
    RETURN = "RETURN"

    def stock_delta(self, quantity: int) -> int:
        """Signed change this movement makes to a product's quantity."""
        if self is TransactionType.SALE:
            return -quantity
        return quantity


@dataclass
class Transaction:
    """A movement of ``quantity`` units of ``product``.

    ``timestamp`` is supplied by the user and is not necessarily
    monotonic across transactions.
    """

    id: str
    product: Product
    type: TransactionType
    quantity: int
    timestamp: datetime

    @property
    def product_id(self) -> str:
        return self.product.id

    def accept(self, visitor: InventoryVisitor) -> None:
        visitor.visit_transaction(self)
