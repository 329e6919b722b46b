"""Order routes: checkout plus the admin's order views."""

from __future__ import annotations

from fastapi import APIRouter

from ecom.application.common import require_record, require_store
from ecom.application.orders import (
    CheckoutHandler,
    MarkOrderUnpaidHandler,
    RecordPaymentHandler,
)
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_order
from ecom.infrastructure.api.schemas import CheckoutBody, OrderOut, PaymentBody

router = APIRouter(prefix="/{store_id}", tags=["orders"])


@router.post("/checkout", summary="Turn a cart into an unpaid order")
def checkout(store_id: str, body: CheckoutBody, db: DbDep) -> OrderOut:
    order = CheckoutHandler(db).handle(
        store_id,
        product_ids=body.product_ids,
        phone=body.phone,
        address=body.address,
    )
    return present_order(order)


@router.get("/orders", summary="List a store's orders")
def list_orders(store_id: str, db: DbDep) -> list[OrderOut]:
    require_store(db, store_id)
    orders = db.orders.find_many(
        where={"store_id": store_id},
        order_by={"created_at": "desc"},
    )
    return [present_order(order) for order in orders]


@router.get("/orders/{order_id}", summary="Get one order")
def get_order(store_id: str, order_id: str, db: DbDep) -> OrderOut:
    return present_order(require_record(db.orders, order_id, store_id, "Order"))


@router.patch("/orders/{order_id}", summary="Set an order's paid flag")
def update_paid(store_id: str, order_id: str, body: PaymentBody, db: DbDep) -> OrderOut:
    if not body.is_paid:
        return present_order(MarkOrderUnpaidHandler(db).handle(store_id, order_id))
    order = RecordPaymentHandler(db).handle(
        store_id, order_id, phone=body.phone, address=body.address
    )
    return present_order(order)
