"""Generic repository contract shared by every entity type.

A repository owns an in-memory cache of one entity type and keeps it
consistent with the durable store. Writes go to the store first; the
cache changes only after the store confirms the write.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

E = TypeVar("E")


class Repository(ABC, Generic[E]):

    @abstractmethod
    def load_all(self) -> bool:
        """Replace the cache with every record in the store.

        Returns False and keeps the previous cache if the read fails.
        """

    @abstractmethod
    def get_all(self) -> list[E]:
        """Return a copy of every cached entity, in cache order."""

    @abstractmethod
    def find_by_id(self, entity_id: str) -> E | None:
        """Return a copy of the cached entity with this ID, or None."""

    @abstractmethod
    def add(self, entity: E) -> bool:
        """Insert a new entity. False if the store rejected it."""

    @abstractmethod
    def update(self, entity: E) -> bool:
        """Overwrite the stored entity with the same ID.

        False if no record has that ID or the store failed.
        """

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        """Remove the entity with this ID. False if nothing was removed."""
