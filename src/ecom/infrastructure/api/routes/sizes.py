"""Size routes: /api/{store_id}/sizes."""

from __future__ import annotations

from fastapi import APIRouter

from ecom.application.common import require_record, require_store
from ecom.application.sizes import CreateSizeHandler, DeleteSizeHandler, UpdateSizeHandler
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_size
from ecom.infrastructure.api.schemas import SizeBody, SizeOut

router = APIRouter(prefix="/{store_id}/sizes", tags=["sizes"])


@router.get("", summary="List a store's sizes")
def list_sizes(store_id: str, db: DbDep) -> list[SizeOut]:
    require_store(db, store_id)
    sizes = db.sizes.find_many(
        where={"store_id": store_id},
        order_by={"created_at": "desc"},
    )
    return [present_size(size) for size in sizes]


@router.get("/{size_id}", summary="Get one size")
def get_size(store_id: str, size_id: str, db: DbDep) -> SizeOut:
    return present_size(require_record(db.sizes, size_id, store_id, "Size"))


@router.post("", summary="Create a size")
def create_size(store_id: str, body: SizeBody, db: DbDep) -> SizeOut:
    return present_size(CreateSizeHandler(db).handle(store_id, name=body.name, value=body.value))


@router.patch("/{size_id}", summary="Update a size")
def update_size(store_id: str, size_id: str, body: SizeBody, db: DbDep) -> SizeOut:
    size = UpdateSizeHandler(db).handle(store_id, size_id, name=body.name, value=body.value)
    return present_size(size)


@router.delete("/{size_id}", summary="Delete a size")
def delete_size(store_id: str, size_id: str, db: DbDep) -> SizeOut:
    return present_size(DeleteSizeHandler(db).handle(store_id, size_id))
