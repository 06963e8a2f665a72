"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryReport:
    """Output: one summary line per entity, grouped by entity type."""

    products: list[str]
    suppliers: list[str]
    transactions: list[str]
