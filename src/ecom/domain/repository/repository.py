"""Abstract repository shared by every catalog record type.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON files, in-memory fakes)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from ecom.domain.repository.query import OrderBy, filter_records, sort_records

T = TypeVar("T")


class Repository(ABC, Generic[T]):

    @abstractmethod
    def get_by_id(self, entity_id: str) -> T | None:
        """Return a record by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every record, in storage order."""

    @abstractmethod
    def save(self, entity: T) -> None:
        """Insert or replace a record, keyed by its ``id``."""

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """Remove a record. Deleting a missing ID is a no-op."""

    def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: OrderBy | None = None,
    ) -> list[T]:
        """Return the records matching every ``where`` pair, sorted by ``order_by``."""
        return sort_records(filter_records(self.list_all(), where), order_by)
