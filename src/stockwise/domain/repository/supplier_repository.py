"""Abstract repository for the Supplier entity."""

from __future__ import annotations

from abc import abstractmethod
from datetime import date

from stockwise.domain.model.supplier import Supplier
from stockwise.domain.repository.repository import Repository


class SupplierRepository(Repository[Supplier]):

    @abstractmethod
    def find_by_date(self, day: date) -> list[Supplier]:
        """Return suppliers added on ``day``, read from the store."""
