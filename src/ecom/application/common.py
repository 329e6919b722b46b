"""Lookups every store-scoped use case starts with."""

from __future__ import annotations

from typing import TypeVar

from ecom.domain.exceptions import EntityNotFoundError
from ecom.domain.model.store import Store
from ecom.domain.repository.record_store import RecordStore, Table

T = TypeVar("T")


def require_store(db: RecordStore, store_id: str) -> Store:
    store = db.stores.get_by_id(store_id)
    if store is None:
        raise EntityNotFoundError(f"Store '{store_id}' not found")
    return store


def require_record(table: Table[T], entity_id: str, store_id: str, label: str) -> T:
    """Return the record if it exists in *store_id*; other stores' records are invisible."""
    entity = table.find_unique(entity_id, store_id=store_id)
    if entity is None:
        raise EntityNotFoundError(f"{label} '{entity_id}' not found")
    return entity
