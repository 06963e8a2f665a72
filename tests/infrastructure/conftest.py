"""Fixtures for tests that run against a real SQLite store."""

import pytest

from stockwise.infrastructure.config import StoreSettings
from stockwise.infrastructure.persistence.connection import ConnectionProvider
from stockwise.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from stockwise.infrastructure.persistence.sql_supplier_repository import (
    SqlSupplierRepository,
)
from stockwise.infrastructure.persistence.sql_transaction_repository import (
    SqlTransactionRepository,
)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'stockwise.db'}"


@pytest.fixture
def settings(db_url, monkeypatch):
    monkeypatch.setenv("STOCKWISE_DB_URL", db_url)
    monkeypatch.setenv("STOCKWISE_DB_PASSWORD", "test-secret")
    return StoreSettings(_env_file=None)


@pytest.fixture
def connection(settings):
    provider = ConnectionProvider.from_settings(settings)
    yield provider
    provider.close()


@pytest.fixture
def product_repo(connection):
    return SqlProductRepository(connection)


@pytest.fixture
def supplier_repo(connection):
    return SqlSupplierRepository(connection)


@pytest.fixture
def transaction_repo(connection, product_repo):
    return SqlTransactionRepository(connection, product_repo)
