"""Application service: Product create / update / delete use cases."""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.application.dto import ProductSpec
from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CreateProductHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, spec: ProductSpec) -> Product:
        require_store(self._db, store_id)
        product = Product.create(
            store_id=store_id,
            name=spec.name,
            price=Money.of(spec.price),
            category_id=spec.category_id,
            size_id=spec.size_id,
            color_id=spec.color_id,
            image_urls=list(spec.image_urls),
            is_featured=spec.is_featured,
            is_archived=spec.is_archived,
        )
        self._db.products.save(product)
        logger.info(f"Created product '{product.name}' at {product.price} in store {store_id}")
        return product


class UpdateProductHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, product_id: str, spec: ProductSpec) -> Product:
        """Replace a product's fields.

        Existing orders only reference the product, so a price change shows
        up in their totals; archive and recreate to keep history intact.
        """
        product = require_record(self._db.products, product_id, store_id, "Product")
        product.update(
            name=spec.name,
            price=Money.of(spec.price),
            category_id=spec.category_id,
            size_id=spec.size_id,
            color_id=spec.color_id,
            image_urls=list(spec.image_urls),
            is_featured=spec.is_featured,
            is_archived=spec.is_archived,
        )
        self._db.products.save(product)
        logger.info(f"Updated product {product_id} in store {store_id}")
        return product


class DeleteProductHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, product_id: str) -> Product:
        """Delete a product. Raises IntegrityError while an order references it."""
        require_record(self._db.products, product_id, store_id, "Product")
        product = self._db.products.delete(product_id)
        logger.info(f"Deleted product {product_id} from store {store_id}")
        return product
