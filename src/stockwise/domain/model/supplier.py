"""Supplier entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from stockwise.domain.model.product import Product

if TYPE_CHECKING:
    from stockwise.domain.analytics.inventory_visitor import InventoryVisitor


@dataclass
class Supplier:
    """A supplier and its contact details.

    ``supplied_products`` is an association only: a supplier never owns
    the lifecycle of the products it lists, and the list is not persisted.
    """

    id: str
    name: str
    email: str
    phone: str
    address: str
    date_added: datetime = field(default_factory=datetime.now)
    supplied_products: list[Product] = field(default_factory=list)

    def add_product(self, product: Product) -> None:
        self.supplied_products.append(product)

    def accept(self, visitor: InventoryVisitor) -> None:
        visitor.visit_supplier(self)
