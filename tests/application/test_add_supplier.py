"""Integration tests for the AddSupplier use case."""

import pytest

from stockwise.application.add_supplier import AddSupplierHandler
from stockwise.domain.exceptions import ValidationError
from tests.fakes import FakeSupplierRepository


class TestAddSupplier:

    def test_add_persists_supplier(self):
        repo = FakeSupplierRepository()
        supplier = AddSupplierHandler(repo).handle(
            "S1", "Acme", "sales@acme.test", "555-0100", "1 Main St"
        )
        assert repo.find_by_id("S1") == supplier
        assert supplier.supplied_products == []

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            AddSupplierHandler(FakeSupplierRepository()).handle("S1", "Acme", "not-an-email")

    def test_duplicate_id_rejected(self):
        repo = FakeSupplierRepository()
        handler = AddSupplierHandler(repo)
        handler.handle("S1", "Acme", "sales@acme.test")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("S1", "Other", "other@acme.test")
