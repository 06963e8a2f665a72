"""CLI commands for products."""

from __future__ import annotations

from datetime import datetime

import click

from stockwise.application.add_product import AddProductHandler
from stockwise.application.delete_product import DeleteProductHandler
from stockwise.application.update_product import UpdateProductHandler
from stockwise.domain.exceptions import DomainException
from stockwise.infrastructure.cli.context import app_context


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--threshold", required=True, type=int, help="Reorder level.")
@click.option("--price", required=True, type=float, help="Unit price (e.g. 15.00).")
@click.option("--owner", default=None, help="Username managing this product.")
def product_add(
    product_id: str,
    name: str,
    quantity: int,
    threshold: int,
    price: float,
    owner: str | None,
) -> None:
    """Add a new product."""
    handler = AddProductHandler(product_repo=app_context().product_repo)

    try:
        product = handler.handle(product_id, name, quantity, threshold, price, owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added ({product.quantity} in stock)")


@click.command("list")
@click.option("--owner", default=None, help="Only products managed by this user.")
@click.option(
    "--date", "day", default=None, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Only products added on this day (YYYY-MM-DD).",
)
def product_list(owner: str | None, day: datetime | None) -> None:
    """List products."""
    repo = app_context().product_repo
    if owner is not None:
        products = repo.find_by_username(owner)
    elif day is not None:
        products = repo.find_by_date(day.date())
    else:
        products = repo.get_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Qty':>6} {'Min':>6} {'Price':>10} {'Value':>12}")
    click.echo("-" * 69)
    for p in products:
        flag = "  LOW" if p.is_low_stock else ""
        click.echo(
            f"{p.id:<10} {p.name:<20} {p.quantity:>6} {p.threshold:>6} "
            f"{p.unit_price:>10.2f} {p.total_value:>12.2f}{flag}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", default=None, type=int, help="New stock level.")
@click.option("--threshold", default=None, type=int, help="New reorder level.")
@click.option("--price", default=None, type=float, help="New unit price.")
@click.option("--owner", default=None, help="New owning user.")
def product_update(
    product_id: str,
    name: str | None,
    quantity: int | None,
    threshold: int | None,
    price: float | None,
    owner: str | None,
) -> None:
    """Update fields of a product."""
    handler = UpdateProductHandler(product_repo=app_context().product_repo)

    try:
        handler.handle(
            product_id,
            name=name,
            quantity=quantity,
            threshold=threshold,
            unit_price=price,
            username=owner,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product that has no recorded transactions."""
    handler = DeleteProductHandler(product_repo=app_context().product_repo)

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
