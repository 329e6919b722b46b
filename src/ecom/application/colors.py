"""Application service: Color create / update / delete use cases."""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.domain.model.color import Color
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateColorHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, name: str, value: str) -> Color:
        require_store(self._db, store_id)
        color = Color.create(store_id=store_id, name=name, value=value)
        self._db.colors.save(color)
        logger.info(f"Created color '{color.name}' ({color.value}) in store {store_id}")
        return color


class UpdateColorHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, color_id: str, name: str, value: str) -> Color:
        color = require_record(self._db.colors, color_id, store_id, "Color")
        color.update(name=name, value=value)
        self._db.colors.save(color)
        logger.info(f"Updated color {color_id} in store {store_id}")
        return color


class DeleteColorHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, color_id: str) -> Color:
        """Delete a color. Raises IntegrityError while products still use it."""
        require_record(self._db.colors, color_id, store_id, "Color")
        color = self._db.colors.delete(color_id)
        logger.info(f"Deleted color {color_id} from store {store_id}")
        return color
