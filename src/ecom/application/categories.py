"""Application service: Category create / update / delete use cases."""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.domain.model.category import Category
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateCategoryHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, name: str, billboard_id: str) -> Category:
        require_store(self._db, store_id)
        category = Category.create(store_id=store_id, billboard_id=billboard_id, name=name)
        # Foreign keys (billboard in the same store) are checked by the store.
        self._db.categories.save(category)
        logger.info(f"Created category '{category.name}' in store {store_id}")
        return category


class UpdateCategoryHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(
        self, store_id: str, category_id: str, name: str, billboard_id: str
    ) -> Category:
        category = require_record(self._db.categories, category_id, store_id, "Category")
        category.update(billboard_id=billboard_id, name=name)
        self._db.categories.save(category)
        logger.info(f"Updated category {category_id} in store {store_id}")
        return category


class DeleteCategoryHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, category_id: str) -> Category:
        require_record(self._db.categories, category_id, store_id, "Category")
        category = self._db.categories.delete(category_id)
        logger.info(f"Deleted category {category_id} from store {store_id}")
        return category
