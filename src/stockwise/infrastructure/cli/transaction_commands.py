"""CLI commands for stock transactions."""

from __future__ import annotations

from datetime import datetime

import click

from stockwise.application.record_transaction import RecordTransactionHandler
from stockwise.domain.exceptions import DomainException
from stockwise.domain.model.transaction import TransactionType
from stockwise.infrastructure.cli.context import app_context


@click.command("record")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option(
    "--type", "type_name", required=True,
    type=click.Choice([t.value for t in TransactionType], case_sensitive=False),
    help="Kind of movement.",
)
@click.option("--quantity", required=True, type=int, help="Units moved.")
@click.option(
    "--at", "timestamp", default=None,
    type=click.DateTime(formats=["%Y-%m-%d %H:%M", "%Y-%m-%d"]),
    help="When it happened (default: now).",
)
@click.option("--id", "transaction_id", default=None, help="Transaction ID (default: generated).")
def transaction_record(
    product_id: str,
    type_name: str,
    quantity: int,
    timestamp: datetime | None,
    transaction_id: str | None,
) -> None:
    """Record a stock movement and adjust the product's quantity."""
    app = app_context()
    handler = RecordTransactionHandler(
        transaction_repo=app.transaction_repo,
        product_repo=app.product_repo,
    )

    try:
        transaction = handler.handle(
            product_id,
            TransactionType(type_name.upper()),
            quantity,
            timestamp=timestamp,
            transaction_id=transaction_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Transaction {transaction.id} recorded: {transaction.type.value} "
        f"{transaction.quantity} x {transaction.product.name} "
        f"(now {transaction.product.quantity} in stock)"
    )


@click.command("list")
@click.option("--product", "product_id", default=None, help="Only this product's movements.")
@click.option(
    "--date", "day", default=None, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Only movements on this day (YYYY-MM-DD).",
)
def transaction_list(product_id: str | None, day: datetime | None) -> None:
    """List recorded transactions."""
    repo = app_context().transaction_repo
    if product_id is not None:
        transactions = repo.find_by_product_id(product_id)
    elif day is not None:
        transactions = repo.find_by_date(day.date())
    else:
        transactions = repo.get_all()

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<14} {'Product':<20} {'Type':<8} {'Qty':>6}  {'When':<16}")
    click.echo("-" * 68)
    for t in transactions:
        click.echo(
            f"{t.id:<14} {t.product.name:<20} {t.type.value:<8} {t.quantity:>6}  "
            f"{t.timestamp:%Y-%m-%d %H:%M}"
        )


@click.command("delete")
@click.option("--id", "transaction_id", required=True, help="Transaction ID.")
def transaction_delete(transaction_id: str) -> None:
    """Delete a transaction record. Product stock is not adjusted."""
    if not app_context().transaction_repo.delete(transaction_id):
        raise click.ClickException(f"Transaction '{transaction_id}' could not be deleted")
    click.echo(f"Transaction {transaction_id} deleted.")
