"""Write-through cache over one SQL table.

Every public operation that touches the cache holds the repository's
lock for its whole duration, store round-trip included, so the cache
and the store are never seen half-updated. Store writes happen first and
the cache only changes once the write has committed.
"""

from __future__ import annotations

import copy
import logging
import threading
from abc import abstractmethod
from datetime import date, datetime, time, timedelta
from typing import Any, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from stockwise.domain.repository.repository import Repository
from stockwise.infrastructure.persistence.connection import ConnectionProvider
from stockwise.infrastructure.persistence.tables import Base

logger = logging.getLogger(__name__)

E = TypeVar("E")


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open datetime range covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


class SqlRepository(Repository[E]):

    row_type: type[Base]

    def __init__(self, connection: ConnectionProvider) -> None:
        self._connection = connection
        self._cache: list[E] = []
        self._lock = threading.RLock()
        try:
            connection.ensure_schema()
        except SQLAlchemyError:
            logger.exception("Could not prepare table %s", self._table)
        self.load_all()

    # --- Repository interface -------------------------------------------------

    def load_all(self) -> bool:
        with self._lock:
            try:
                with self._connection.session() as session:
                    rows = session.scalars(select(self.row_type)).all()
                    loaded = [self._to_domain(row) for row in rows]
            except (SQLAlchemyError, ValueError):
                logger.exception(
                    "Reload of %s failed; keeping %d cached records",
                    self._table, len(self._cache),
                )
                return False
            self._cache = loaded
            logger.debug("Loaded %d records from %s", len(loaded), self._table)
            return True

    def get_all(self) -> list[E]:
        with self._lock:
            entities = copy.deepcopy(self._cache)
        return [self._refresh(e) for e in entities]

    def find_by_id(self, entity_id: str) -> E | None:
        with self._lock:
            index = self._index_of(entity_id)
            if index is None:
                return None
            entity = copy.deepcopy(self._cache[index])
        return self._refresh(entity)

    def add(self, entity: E) -> bool:
        entity_id = self._entity_id(entity)
        with self._lock:
            try:
                with self._connection.begin() as session:
                    session.add(self.row_type(id=entity_id, **self._to_values(entity)))
            except SQLAlchemyError:
                logger.exception("Insert of %s %r failed", self._table, entity_id)
                return False
            self._cache.append(copy.deepcopy(entity))
            return True

    def update(self, entity: E) -> bool:
        entity_id = self._entity_id(entity)
        with self._lock:
            try:
                with self._connection.begin() as session:
                    result = session.execute(
                        update(self.row_type)
                        .where(self.row_type.id == entity_id)
                        .values(**self._to_values(entity))
                    )
                    affected = result.rowcount
            except SQLAlchemyError:
                logger.exception("Update of %s %r failed", self._table, entity_id)
                return False
            if affected == 0:
                logger.warning("Update of %s %r matched no record", self._table, entity_id)
                return False

            index = self._index_of(entity_id)
            if index is None:
                self._cache.append(copy.deepcopy(entity))
            else:
                self._cache[index] = copy.deepcopy(entity)
            return True

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            try:
                with self._connection.begin() as session:
                    result = session.execute(
                        delete(self.row_type).where(self.row_type.id == entity_id)
                    )
                    affected = result.rowcount
            except SQLAlchemyError:
                logger.exception("Delete of %s %r failed", self._table, entity_id)
                return False
            if affected == 0:
                logger.warning("Delete of %s %r matched no record", self._table, entity_id)
                return False

            self._cache = [e for e in self._cache if self._entity_id(e) != entity_id]
            return True

    # --- Store queries bypassing the cache ------------------------------------

    def _query(self, *criteria: Any) -> list[E]:
        try:
            with self._connection.session() as session:
                rows = session.scalars(select(self.row_type).where(*criteria)).all()
                return [self._to_domain(row) for row in rows]
        except (SQLAlchemyError, ValueError):
            logger.exception("Query on %s failed", self._table)
            return []

    # --- Mapping hooks --------------------------------------------------------

    @abstractmethod
    def _to_values(self, entity: E) -> dict[str, Any]:
        """Column values for every non-key column."""

    @abstractmethod
    def _to_domain(self, row: Any) -> E:
        """Build an entity from a loaded row."""

    def _entity_id(self, entity: E) -> str:
        return entity.id

    def _refresh(self, entity: E) -> E:
        """Bring data owned by other repositories up to date on a copy being returned."""
        return entity

    # --- Internal helpers -----------------------------------------------------

    @property
    def _table(self) -> str:
        return self.row_type.__tablename__

    def _index_of(self, entity_id: str) -> int | None:
        for i, cached in enumerate(self._cache):
            if self._entity_id(cached) == entity_id:
                return i
        return None
