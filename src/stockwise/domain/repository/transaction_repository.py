"""Abstract repository for the Transaction entity."""

from __future__ import annotations

from abc import abstractmethod
from datetime import date

from stockwise.domain.model.transaction import Transaction
from stockwise.domain.repository.repository import Repository


class TransactionRepository(Repository[Transaction]):

    @abstractmethod
    def find_by_product_id(self, product_id: str) -> list[Transaction]:
        """Return every transaction for one product, read from the store."""

    @abstractmethod
    def find_by_date(self, day: date) -> list[Transaction]:
        """Return transactions timestamped on ``day``, read from the store."""
