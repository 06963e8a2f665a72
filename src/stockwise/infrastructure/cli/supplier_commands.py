"""CLI commands for suppliers."""

from __future__ import annotations

from datetime import datetime

import click

from stockwise.application.add_supplier import AddSupplierHandler
from stockwise.application.update_supplier import UpdateSupplierHandler
from stockwise.domain.exceptions import DomainException
from stockwise.infrastructure.cli.context import app_context


@click.command("add")
@click.option("--id", "supplier_id", required=True, help="Supplier ID.")
@click.option("--name", required=True, help="Supplier name.")
@click.option("--email", required=True, help="Contact e-mail address.")
@click.option("--phone", default="", help="Contact phone number.")
@click.option("--address", default="", help="Postal address.")
def supplier_add(supplier_id: str, name: str, email: str, phone: str, address: str) -> None:
    """Add a new supplier."""
    handler = AddSupplierHandler(supplier_repo=app_context().supplier_repo)

    try:
        supplier = handler.handle(supplier_id, name, email, phone, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.id} '{supplier.name}' added")


@click.command("list")
@click.option(
    "--date", "day", default=None, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Only suppliers added on this day (YYYY-MM-DD).",
)
def supplier_list(day: datetime | None) -> None:
    """List suppliers."""
    repo = app_context().supplier_repo
    suppliers = repo.find_by_date(day.date()) if day is not None else repo.get_all()

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Email':<28} {'Phone':<15}")
    click.echo("-" * 76)
    for s in suppliers:
        click.echo(f"{s.id:<10} {s.name:<20} {s.email:<28} {s.phone:<15}")


@click.command("update")
@click.option("--id", "supplier_id", required=True, help="Supplier ID.")
@click.option("--name", default=None, help="New supplier name.")
@click.option("--email", default=None, help="New contact e-mail address.")
@click.option("--phone", default=None, help="New contact phone number.")
@click.option("--address", default=None, help="New postal address.")
def supplier_update(
    supplier_id: str,
    name: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Change a supplier's contact details."""
    handler = UpdateSupplierHandler(supplier_repo=app_context().supplier_repo)

    try:
        supplier = handler.handle(supplier_id, name, email, phone, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.id} updated: {supplier.name} <{supplier.email}>")


@click.command("delete")
@click.option("--id", "supplier_id", required=True, help="Supplier ID.")
def supplier_delete(supplier_id: str) -> None:
    """Delete a supplier."""
    if not app_context().supplier_repo.delete(supplier_id):
        raise click.ClickException(f"Supplier '{supplier_id}' could not be deleted")
    click.echo(f"Supplier {supplier_id} deleted.")
