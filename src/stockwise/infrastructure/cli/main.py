import logging

import click

from stockwise.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from stockwise.infrastructure.cli.report_commands import (
    report_inventory,
    report_low_stock,
    report_valuation,
)
from stockwise.infrastructure.cli.supplier_commands import (
    supplier_add,
    supplier_delete,
    supplier_list,
    supplier_update,
)
from stockwise.infrastructure.cli.transaction_commands import (
    transaction_delete,
    transaction_list,
    transaction_record,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """StockWise: stock levels, suppliers and stock movements"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def transaction() -> None:
    """Record and review stock movements."""


@cli.group()
def report() -> None:
    """Inventory reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
supplier.add_command(supplier_add)
supplier.add_command(supplier_delete)
supplier.add_command(supplier_list)
supplier.add_command(supplier_update)
transaction.add_command(transaction_delete)
transaction.add_command(transaction_list)
transaction.add_command(transaction_record)
report.add_command(report_inventory)
report.add_command(report_low_stock)
report.add_command(report_valuation)
