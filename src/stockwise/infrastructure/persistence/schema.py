"""Create missing tables and add columns introduced after a table was created."""

from __future__ import annotations

import logging

from sqlalchemy import Column, Table, inspect, text
from sqlalchemy.engine import Connection, Dialect, Engine

from stockwise.infrastructure.persistence.tables import Base

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> None:
    """Bring the store up to the current table definitions.

    Only additive changes are made. Existing rows pick up the column's
    server default. Defaults that are SQL expressions (``now()``) cannot be
    part of ``ADD COLUMN`` on every backend, so rows still NULL in such a
    column are filled in with the expression's value instead.
    """
    Base.metadata.create_all(engine)
    inspector = inspect(engine)

    with engine.begin() as conn:
        for table in Base.metadata.sorted_tables:
            existing = {c["name"].lower() for c in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.primary_key or column.name.lower() in existing:
                    continue
                conn.execute(text(_add_column_ddl(table, column, engine.dialect)))
                logger.info("Added column %s.%s", table.name, column.name)
            _backfill_expression_defaults(conn, table)


def _has_constant_default(column: Column) -> bool:
    return column.server_default is not None and isinstance(column.server_default.arg, str)


def _add_column_ddl(table: Table, column: Column, dialect: Dialect) -> str:
    preparer = dialect.identifier_preparer
    ddl = (
        f"ALTER TABLE {preparer.format_table(table)} "
        f"ADD COLUMN {preparer.format_column(column)} "
        f"{column.type.compile(dialect=dialect)}"
    )
    if _has_constant_default(column):
        ddl += f" DEFAULT {column.server_default.arg}"
    return ddl


def _backfill_expression_defaults(conn: Connection, table: Table) -> None:
    for column in table.columns:
        if column.server_default is None or _has_constant_default(column):
            continue
        result = conn.execute(
            table.update()
            .where(column.is_(None))
            .values({column.name: column.server_default.arg})
        )
        if result.rowcount:
            logger.info(
                "Filled %d empty %s.%s values", result.rowcount, table.name, column.name
            )
