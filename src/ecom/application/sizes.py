"""Application service: Size create / update / delete use cases."""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.domain.model.size import Size
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateSizeHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, name: str, value: str) -> Size:
        require_store(self._db, store_id)
        size = Size.create(store_id=store_id, name=name, value=value)
        self._db.sizes.save(size)
        logger.info(f"Created size '{size.name}' in store {store_id}")
        return size


class UpdateSizeHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, size_id: str, name: str, value: str) -> Size:
        size = require_record(self._db.sizes, size_id, store_id, "Size")
        size.update(name=name, value=value)
        self._db.sizes.save(size)
        logger.info(f"Updated size {size_id} in store {store_id}")
        return size


class DeleteSizeHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, size_id: str) -> Size:
        require_record(self._db.sizes, size_id, store_id, "Size")
        size = self._db.sizes.delete(size_id)
        logger.info(f"Deleted size {size_id} from store {store_id}")
        return size
