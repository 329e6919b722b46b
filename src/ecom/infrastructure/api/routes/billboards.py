"""Billboard routes: /api/{store_id}/billboards."""

from __future__ import annotations

from fastapi import APIRouter

from ecom.application.billboards import (
    CreateBillboardHandler,
    DeleteBillboardHandler,
    UpdateBillboardHandler,
)
from ecom.application.common import require_record, require_store
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_billboard
from ecom.infrastructure.api.schemas import BillboardBody, BillboardOut

router = APIRouter(prefix="/{store_id}/billboards", tags=["billboards"])


@router.get("", summary="List a store's billboards")
def list_billboards(store_id: str, db: DbDep) -> list[BillboardOut]:
    require_store(db, store_id)
    billboards = db.billboards.find_many(
        where={"store_id": store_id},
        order_by={"created_at": "desc"},
    )
    return [present_billboard(billboard) for billboard in billboards]


@router.get("/{billboard_id}", summary="Get one billboard")
def get_billboard(store_id: str, billboard_id: str, db: DbDep) -> BillboardOut:
    billboard = require_record(db.billboards, billboard_id, store_id, "Billboard")
    return present_billboard(billboard)


@router.post("", summary="Create a billboard")
def create_billboard(store_id: str, body: BillboardBody, db: DbDep) -> BillboardOut:
    billboard = CreateBillboardHandler(db).handle(
        store_id, label=body.label, image_url=body.image_url
    )
    return present_billboard(billboard)


@router.patch("/{billboard_id}", summary="Update a billboard")
def update_billboard(
    store_id: str, billboard_id: str, body: BillboardBody, db: DbDep
) -> BillboardOut:
    billboard = UpdateBillboardHandler(db).handle(
        store_id, billboard_id, label=body.label, image_url=body.image_url
    )
    return present_billboard(billboard)


@router.delete("/{billboard_id}", summary="Delete a billboard")
def delete_billboard(store_id: str, billboard_id: str, db: DbDep) -> BillboardOut:
    return present_billboard(DeleteBillboardHandler(db).handle(store_id, billboard_id))
