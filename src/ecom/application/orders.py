"""Application service: Checkout and payment use cases.

Checkout turns a storefront cart (a list of product ids) into an unpaid
order. Recording the payment marks the order paid and archives the
products sold so they drop off the storefront.
"""

from __future__ import annotations

from ecom.application.common import require_record, require_store
from ecom.domain.exceptions import EntityNotFoundError, ValidationError
from ecom.domain.model.order import Order
from ecom.domain.repository.record_store import RecordStore
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class CheckoutHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(
        self,
        store_id: str,
        product_ids: list[str],
        phone: str = "",
        address: str = "",
    ) -> Order:
        require_store(self._db, store_id)

        for product_id in product_ids:
            product = self._db.products.find_unique(product_id, store_id=store_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")
            if product.is_archived:
                raise ValidationError(f"Product '{product.name}' is no longer available")

        order = Order.create(
            store_id=store_id,
            product_ids=product_ids,
            phone=phone,
            address=address,
        )
        self._db.orders.save(order)
        logger.info(
            f"Checked out order {order.id} with {len(order.items)} item(s) in store {store_id}"
        )
        return order


class RecordPaymentHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(
        self,
        store_id: str,
        order_id: str,
        phone: str | None = None,
        address: str | None = None,
    ) -> Order:
        order = require_record(self._db.orders, order_id, store_id, "Order")
        order.record_payment(phone=phone, address=address)
        self._db.orders.save(order)

        for product_id in order.product_ids:
            product = self._db.products.get_by_id(product_id)
            if product is not None and not product.is_archived:
                product.archive()
                self._db.products.save(product)

        logger.info(f"Recorded payment for order {order_id} in store {store_id}")
        return order


class MarkOrderUnpaidHandler:
    """Undo a recorded payment. Products archived by the payment stay archived."""

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str, order_id: str) -> Order:
        order = require_record(self._db.orders, order_id, store_id, "Order")
        if order.is_paid:
            order.mark_unpaid()
            self._db.orders.save(order)
            logger.info(f"Marked order {order_id} in store {store_id} as unpaid")
        return order
