"""Application service: composite reports over every repository.

Each build uses a new visitor. Visitors accumulate state and must not be
shared between reports or threads.
"""

from __future__ import annotations

from stockwise.application.dto import InventoryReport
from stockwise.domain.analytics.inventory_visitor import accept_all
from stockwise.domain.analytics.low_stock_detector import LowStockDetector
from stockwise.domain.analytics.summary_collector import SummaryCollector
from stockwise.domain.analytics.valuation_accumulator import ValuationAccumulator
from stockwise.domain.model.product import Product
from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.domain.repository.supplier_repository import SupplierRepository
from stockwise.domain.repository.transaction_repository import TransactionRepository


class ReportAssembler:

    def __init__(
        self,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo
        self._transaction_repo = transaction_repo

    def build_inventory_report(self) -> InventoryReport:
        collector = SummaryCollector()
        accept_all(self._product_repo.get_all(), collector)
        accept_all(self._supplier_repo.get_all(), collector)
        accept_all(self._transaction_repo.get_all(), collector)
        return InventoryReport(
            products=collector.product_summaries,
            suppliers=collector.supplier_summaries,
            transactions=collector.transaction_summaries,
        )

    def build_low_stock_report(self) -> list[Product]:
        """Low-stock products in repository order; empty when none qualify."""
        detector = LowStockDetector()
        accept_all(self._product_repo.get_all(), detector)
        return detector.low_stock_products

    def build_valuation_report(self) -> float:
        accumulator = ValuationAccumulator()
        accept_all(self._product_repo.get_all(), accumulator)
        return accumulator.total_value
