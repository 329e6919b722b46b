"""Order aggregate.

An order is created unpaid at checkout with one item per product bought.
Phone and address are filled in when the payment is recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import new_id, utc_now


@dataclass(frozen=True)
class OrderItem:
    id: str
    order_id: str
    product_id: str


@dataclass
class Order:
    """Aggregate root for checkout orders.

    ``Order.create()`` validates new orders; ``__init__`` is left plain so
    the repository can rebuild persisted orders as they are.
    """

    id: str
    store_id: str
    items: list[OrderItem]
    is_paid: bool = False
    phone: str = ""
    address: str = ""
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(
        store_id: str,
        product_ids: list[str],
        phone: str = "",
        address: str = "",
    ) -> Order:
        if not product_ids:
            raise ValidationError("Product ids are required")
        order_id = new_id()
        items = [
            OrderItem(id=new_id(), order_id=order_id, product_id=product_id)
            for product_id in product_ids
        ]
        return Order(
            id=order_id,
            store_id=store_id,
            items=items,
            phone=phone.strip(),
            address=address.strip(),
        )

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.items]

    def record_payment(self, phone: str | None = None, address: str | None = None) -> None:
        """Mark the order paid, keeping contact details already on file."""
        if self.is_paid:
            raise ValidationError(f"Order {self.id} is already paid")
        self.is_paid = True
        if phone:
            self.phone = phone.strip()
        if address:
            self.address = address.strip()
        self.updated_at = utc_now()

    def mark_unpaid(self) -> None:
        self.is_paid = False
        self.updated_at = utc_now()
