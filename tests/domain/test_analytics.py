"""Unit tests for the report visitors."""

import itertools
from datetime import datetime

import pytest

from stockwise.domain.analytics.inventory_visitor import InventoryVisitor, accept_all
from stockwise.domain.analytics.low_stock_detector import LowStockDetector
from stockwise.domain.analytics.summary_collector import SummaryCollector
from stockwise.domain.analytics.valuation_accumulator import ValuationAccumulator
from stockwise.domain.model.product import Product
from stockwise.domain.model.supplier import Supplier
from stockwise.domain.model.transaction import Transaction, TransactionType


def _products() -> list[Product]:
    return [
        Product(id="P1", name="Widget", quantity=2, threshold=5, unit_price=10.0),
        Product(id="P2", name="Gadget", quantity=50, threshold=10, unit_price=0.1),
        Product(id="P3", name="Gizmo", quantity=0, threshold=1, unit_price=7.25),
        Product(id="P4", name="Doohickey", quantity=3, threshold=3, unit_price=0.2),
    ]


def _supplier() -> Supplier:
    return Supplier(
        id="S1", name="Acme", email="sales@acme.test",
        phone="555-0100", address="1 Main St",
    )


def _transaction(product: Product) -> Transaction:
    return Transaction(
        id="T1", product=product, type=TransactionType.RESTOCK,
        quantity=5, timestamp=datetime(2024, 3, 5, 14, 30),
    )


class RecordingVisitor(InventoryVisitor):

    def __init__(self):
        self.calls = []

    def visit_product(self, product):
        self.calls.append(("product", product.id))

    def visit_supplier(self, supplier):
        self.calls.append(("supplier", supplier.id))

    def visit_transaction(self, transaction):
        self.calls.append(("transaction", transaction.id))


class TestDispatch:

    def test_each_entity_calls_its_own_handler(self):
        product = _products()[0]
        visitor = RecordingVisitor()
        accept_all([product, _supplier(), _transaction(product)], visitor)
        assert visitor.calls == [("product", "P1"), ("supplier", "S1"), ("transaction", "T1")]

    def test_empty_input_visits_nothing(self):
        visitor = RecordingVisitor()
        accept_all([], visitor)
        assert visitor.calls == []


class TestSummaryCollector:

    def test_summaries_kept_per_type(self):
        product = _products()[0]
        collector = SummaryCollector()
        accept_all([_transaction(product), _supplier(), product], collector)

        assert len(collector.product_summaries) == 1
        assert len(collector.supplier_summaries) == 1
        assert len(collector.transaction_summaries) == 1

    def test_product_summary_content(self):
        collector = SummaryCollector()
        _products()[0].accept(collector)
        line = collector.product_summaries[0]
        assert "P1" in line
        assert "Widget" in line
        assert "qty=2" in line
        assert "unit_price=10.00" in line

    def test_transaction_summary_names_product_and_type(self):
        collector = SummaryCollector()
        _transaction(_products()[0]).accept(collector)
        line = collector.transaction_summaries[0]
        assert "RESTOCK" in line
        assert "Widget" in line
        assert "2024-03-05 14:30" in line

    def test_supplier_summary_lists_supplied_products(self):
        supplier = _supplier()
        supplier.add_product(_products()[0])
        collector = SummaryCollector()
        supplier.accept(collector)
        assert "Widget" in collector.supplier_summaries[0]

    def test_order_follows_visitation(self):
        collector = SummaryCollector()
        accept_all(reversed(_products()), collector)
        ids = [line.split()[1].rstrip(":") for line in collector.product_summaries]
        assert ids == ["P4", "P3", "P2", "P1"]

    def test_returned_lists_are_copies(self):
        collector = SummaryCollector()
        accept_all(_products(), collector)
        collector.product_summaries.clear()
        assert len(collector.product_summaries) == 4


class TestLowStockDetector:

    def test_flags_product_below_threshold(self):
        detector = LowStockDetector()
        accept_all(_products()[:1], detector)
        assert [p.id for p in detector.low_stock_products] == ["P1"]

    def test_quantity_equal_to_threshold_not_flagged(self):
        detector = LowStockDetector()
        accept_all(_products()[3:], detector)
        assert detector.low_stock_products == []

    def test_preserves_visitation_order(self):
        detector = LowStockDetector()
        accept_all(reversed(_products()), detector)
        assert [p.id for p in detector.low_stock_products] == ["P3", "P1"]

    def test_same_membership_for_every_order(self):
        expected = {"P1", "P3"}
        for ordering in itertools.permutations(_products()):
            detector = LowStockDetector()
            accept_all(ordering, detector)
            assert {p.id for p in detector.low_stock_products} == expected

    def test_ignores_suppliers_and_transactions(self):
        detector = LowStockDetector()
        accept_all([_supplier(), _transaction(_products()[0])], detector)
        assert detector.low_stock_products == []


class TestValuationAccumulator:

    def test_starts_at_zero(self):
        assert ValuationAccumulator().total_value == 0.0

    def test_single_product(self):
        accumulator = ValuationAccumulator()
        _products()[0].accept(accumulator)
        assert accumulator.total_value == 20.0

    def test_sums_all_products(self):
        accumulator = ValuationAccumulator()
        accept_all(_products(), accumulator)
        assert accumulator.total_value == pytest.approx(20.0 + 5.0 + 0.0 + 0.6)

    def test_total_independent_of_order(self):
        totals = set()
        for ordering in itertools.permutations(_products()):
            accumulator = ValuationAccumulator()
            accept_all(ordering, accumulator)
            totals.add(accumulator.total_value)
        assert len(totals) == 1

    def test_ignores_suppliers_and_transactions(self):
        accumulator = ValuationAccumulator()
        accept_all([_supplier(), _transaction(_products()[0])], accumulator)
        assert accumulator.total_value == 0.0
