"""CLI commands for inventory reports."""

from __future__ import annotations

import click

from stockwise.application.report_assembler import ReportAssembler
from stockwise.infrastructure.cli.context import app_context


def _assembler() -> ReportAssembler:
    app = app_context()
    return ReportAssembler(app.product_repo, app.supplier_repo, app.transaction_repo)


def _section(title: str, lines: list[str]) -> None:
    click.echo(f"{title} ({len(lines)})")
    click.echo("-" * 40)
    for line in lines:
        click.echo(f"  {line}")
    click.echo()


@click.command("inventory")
def report_inventory() -> None:
    """Summarize every product, supplier and transaction."""
    report = _assembler().build_inventory_report()
    _section("Products", report.products)
    _section("Suppliers", report.suppliers)
    _section("Transactions", report.transactions)


@click.command("low-stock")
def report_low_stock() -> None:
    """List products below their reorder threshold."""
    products = _assembler().build_low_stock_report()

    if not products:
        click.echo("No products are low on stock.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Qty':>6} {'Min':>6}")
    click.echo("-" * 45)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<20} {p.quantity:>6} {p.threshold:>6}")


@click.command("valuation")
def report_valuation() -> None:
    """Show the total value of stock on hand."""
    total = _assembler().build_valuation_report()
    click.echo(f"Total stock value: {total:.2f}")
