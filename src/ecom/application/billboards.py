"""Application service: Billboard create / update / delete use cases."""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.domain.model.billboard import Billboard
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateBillboardHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, label: str, image_url: str) -> Billboard:
        require_store(self._db, store_id)
        billboard = Billboard.create(store_id=store_id, label=label, image_url=image_url)
        self._db.billboards.save(billboard)
        logger.info(f"Created billboard '{billboard.label}' in store {store_id}")
        return billboard


class UpdateBillboardHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(
        self, store_id: str, billboard_id: str, label: str, image_url: str
    ) -> Billboard:
        billboard = require_record(self._db.billboards, billboard_id, store_id, "Billboard")
        billboard.update(label=label, image_url=image_url)
        self._db.billboards.save(billboard)
        logger.info(f"Updated billboard {billboard_id} in store {store_id}")
        return billboard


class DeleteBillboardHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, billboard_id: str) -> Billboard:
        """Delete a billboard. Raises IntegrityError while categories still use it."""
        require_record(self._db.billboards, billboard_id, store_id, "Billboard")
        billboard = self._db.billboards.delete(billboard_id)
        logger.info(f"Deleted billboard {billboard_id} from store {store_id}")
        return billboard
