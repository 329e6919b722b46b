"""Application service: store management use cases."""

from __future__ import annotations

from ecom.application.common import require_store
from ecom.domain.model.store import Store
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateStoreHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, name: str, user_id: str) -> Store:
        store = Store.create(name=name, user_id=user_id)
        self._db.stores.save(store)
        logger.info(f"Created store '{store.name}' ({store.id}) for user {store.user_id}")
        return store


class RenameStoreHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, name: str) -> Store:
        store = require_store(self._db, store_id)
        store.rename(name)
        self._db.stores.save(store)
        logger.info(f"Renamed store {store.id} to '{store.name}'")
        return store


class DeleteStoreHandler:
    """Delete a store. Fails while any record still belongs to it."""

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> Store:
        require_store(self._db, store_id)
        store = self._db.stores.delete(store_id)
        logger.info(f"Deleted store {store.id}")
        return store
