"""Report-capability interface applied across heterogeneous entities.

Each entity's ``accept`` calls exactly one ``visit_*`` method, so a report
never has to inspect the type of what it is handed and entities never
need to know which reports exist. Adding a report means adding a
visitor; adding an entity type means adding one method here and one
handler in every visitor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from stockwise.domain.model.product import Product
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.model.transaction import Transaction


class InventoryElement(Protocol):

    def accept(self, visitor: InventoryVisitor) -> None: ...


class InventoryVisitor(ABC):
    """Accumulates a result over any mix of visited entities.

    Implementations must produce the same cumulative result whatever the
    order and number of visits, because callers feed them from
    independent repository queries. Instances hold state and are meant to
    be used for one report only.
    """

    @abstractmethod
    def visit_product(self, product: Product) -> None: ...

    @abstractmethod
    def visit_supplier(self, supplier: Supplier) -> None: ...

    @abstractmethod
    def visit_transaction(self, transaction: Transaction) -> None: ...


def accept_all(elements: Iterable[InventoryElement], visitor: InventoryVisitor) -> None:
    """Let every element record itself on ``visitor``, in iteration order."""
    for element in elements:
        element.accept(visitor)
