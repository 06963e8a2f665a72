"""End-to-end tests for the click commands against a SQLite file."""

import pytest
from click.testing import CliRunner

from stockwise.infrastructure.cli.main import cli


@pytest.fixture
def run(db_url):
    runner = CliRunner()
    env = {"STOCKWISE_DB_URL": db_url, "STOCKWISE_DB_PASSWORD": "test-secret"}

    def _run(*args: str):
        return runner.invoke(cli, list(args), env=env)

    return _run


def _add_widget(run, quantity: str = "10"):
    return run(
        "product", "add", "--id", "P1", "--name", "Widget",
        "--quantity", quantity, "--threshold", "5", "--price", "10.0",
        "--owner", "alice",
    )


class TestProductCommands:

    def test_add_and_list(self, run):
        result = _add_widget(run)
        assert result.exit_code == 0, result.output
        assert "Product P1 'Widget' added" in result.output

        listing = run("product", "list")
        assert "Widget" in listing.output

    def test_list_by_owner(self, run):
        _add_widget(run)
        assert "Widget" in run("product", "list", "--owner", "alice").output
        assert "No products found." in run("product", "list", "--owner", "bob").output

    def test_duplicate_add_fails(self, run):
        _add_widget(run)
        result = _add_widget(run)
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_update(self, run):
        _add_widget(run)
        result = run("product", "update", "--id", "P1", "--quantity", "1")
        assert result.exit_code == 0, result.output
        assert "LOW" in run("product", "list").output

    def test_delete_unknown_fails(self, run):
        result = run("product", "delete", "--id", "P1")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestTransactionCommands:

    def test_restock_updates_stock(self, run):
        _add_widget(run)
        result = run(
            "transaction", "record", "--product", "P1", "--type", "restock",
            "--quantity", "5", "--at", "2024-03-05 14:30", "--id", "T1",
        )
        assert result.exit_code == 0, result.output
        assert "now 15 in stock" in result.output

        listing = run("transaction", "list", "--product", "P1")
        assert "T1" in listing.output
        assert "RESTOCK" in listing.output

    def test_oversell_fails(self, run):
        _add_widget(run, quantity="1")
        result = run("transaction", "record", "--product", "P1", "--type", "SALE", "--quantity", "2")
        assert result.exit_code != 0
        assert "Insufficient stock" in result.output

    def test_product_with_history_cannot_be_deleted(self, run):
        _add_widget(run)
        run("transaction", "record", "--product", "P1", "--type", "SALE", "--quantity", "1")
        result = run("product", "delete", "--id", "P1")
        assert result.exit_code != 0
        assert "could not be deleted" in result.output


class TestReportCommands:

    def test_low_stock_and_valuation(self, run):
        _add_widget(run, quantity="2")
        low = run("report", "low-stock")
        assert low.exit_code == 0, low.output
        assert "P1" in low.output
        assert "Total stock value: 20.00" in run("report", "valuation").output

    def test_empty_low_stock(self, run):
        assert "No products are low on stock." in run("report", "low-stock").output

    def test_inventory(self, run):
        _add_widget(run)
        run(
            "supplier", "add", "--id", "S1", "--name", "Acme",
            "--email", "sales@acme.test",
        )
        output = run("report", "inventory").output
        assert "Products (1)" in output
        assert "Suppliers (1)" in output
        assert "Transactions (0)" in output



class TestSupplierCommands:

    def _add_acme(self, run):
        return run(
            "supplier", "add", "--id", "S1", "--name", "Acme",
            "--email", "sales@acme.test", "--phone", "555-0100",
        )

    def test_update_changes_contact_details(self, run):
        self._add_acme(run)
        result = run(
            "supplier", "update", "--id", "S1", "--email", "orders@acme.test",
        )
        assert result.exit_code == 0, result.output
        assert "orders@acme.test" in result.output

        listing = run("supplier", "list").output
        assert "orders@acme.test" in listing
        assert "555-0100" in listing

    def test_update_unknown_supplier_fails(self, run):
        result = run("supplier", "update", "--id", "S9", "--name", "Nobody")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_update_with_bad_email_fails(self, run):
        self._add_acme(run)
        result = run("supplier", "update", "--id", "S1", "--email", "nope")
        assert result.exit_code != 0
        assert "Invalid email" in result.output

def test_missing_credential_stops_command(db_url):
    result = CliRunner().invoke(
        cli, ["product", "list"],
        env={"STOCKWISE_DB_URL": db_url, "STOCKWISE_DB_PASSWORD": ""},
    )
    assert result.exit_code != 0
    assert "STOCKWISE_DB_PASSWORD" in result.output


def test_help_needs_no_credential():
    result = CliRunner().invoke(cli, ["product", "--help"], env={"STOCKWISE_DB_PASSWORD": ""})
    assert result.exit_code == 0
    assert "Manage products." in result.output
