"""Tests for additive schema migration on an existing store."""

from sqlalchemy import create_engine, inspect, text

from stockwise.infrastructure.persistence.connection import ConnectionProvider
from stockwise.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


def test_old_products_table_gains_new_columns(db_url, settings):
    legacy = create_engine(db_url)
    with legacy.begin() as conn:
        conn.execute(text(
            "CREATE TABLE products (id VARCHAR(50) PRIMARY KEY, name VARCHAR(255), "
            "quantity INT, threshold INT)"
        ))
        conn.execute(text("INSERT INTO products VALUES ('P1', 'Widget', 4, 2)"))
    legacy.dispose()

    provider = ConnectionProvider.from_settings(settings)
    try:
        repo = SqlProductRepository(provider)
        columns = {c["name"] for c in inspect(provider.engine).get_columns("products")}
        [product] = repo.get_all()
    finally:
        provider.close()

    assert {"unit_price", "username", "created_at"} <= columns
    assert product.quantity == 4
    assert product.unit_price == 0.0
    assert product.username is None


def test_fresh_store_gets_all_tables(connection):
    connection.ensure_schema()
    tables = set(inspect(connection.engine).get_table_names())
    assert {"products", "suppliers", "transactions"} <= tables


def test_ensure_schema_is_repeatable(connection):
    connection.ensure_schema()
    connection.ensure_schema()
    assert "products" in inspect(connection.engine).get_table_names()


def test_migrated_rows_keep_their_added_date_across_reloads(db_url, settings):
    legacy = create_engine(db_url)
    with legacy.begin() as conn:
        conn.execute(text(
            "CREATE TABLE products (id VARCHAR(50) PRIMARY KEY, name VARCHAR(255), "
            "quantity INT, threshold INT)"
        ))
        conn.execute(text("INSERT INTO products VALUES ('P1', 'Widget', 4, 2)"))
    legacy.dispose()

    provider = ConnectionProvider.from_settings(settings)
    try:
        repo = SqlProductRepository(provider)
        first = repo.get_all()
        assert repo.load_all()
        second = repo.get_all()
        reopened = SqlProductRepository(provider).get_all()
        with provider.engine.connect() as conn:
            stored = conn.execute(text("SELECT created_at FROM products")).scalar_one()
    finally:
        provider.close()

    assert stored is not None
    assert first[0].date_added is not None
    assert first == second == reopened
