"""Product entity.

A product is a stock-keeping line: how many units are on hand, the level
at which it should be reordered and what one unit is worth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockwise.domain.analytics.inventory_visitor import InventoryVisitor


@dataclass
class Product:
    """A product held in stock.

    ``quantity`` and ``threshold`` are non-negative by convention only;
    callers validate before handing a product to a repository.
    ``date_added`` is set once at construction and is only changed when a
    caller overrides it explicitly.
    """

    id: str
    name: str
    quantity: int
    threshold: int
    unit_price: float
    username: str | None = None
    date_added: datetime = field(default_factory=datetime.now)

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.threshold

    @property
    def total_value(self) -> float:
        return self.quantity * self.unit_price

    def accept(self, visitor: InventoryVisitor) -> None:
        visitor.visit_product(self)
