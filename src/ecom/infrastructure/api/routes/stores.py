"""Store routes: /api/stores."""

from __future__ import annotations

from fastapi import APIRouter, Query

from ecom.application.common import require_store
from ecom.application.stores import CreateStoreHandler, DeleteStoreHandler, RenameStoreHandler
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_store
from ecom.infrastructure.api.schemas import StoreBody, StoreOut, StoreRenameBody

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", summary="List stores, optionally for one user")
def list_stores(
    db: DbDep,
    user_id: str | None = Query(None, alias="userId"),
) -> list[StoreOut]:
    where = {"user_id": user_id} if user_id else None
    stores = db.stores.find_many(where=where, order_by={"created_at": "asc"})
    return [present_store(store) for store in stores]


@router.get("/{store_id}", summary="Get one store")
def get_store(store_id: str, db: DbDep) -> StoreOut:
    return present_store(require_store(db, store_id))


@router.post("", summary="Create a store")
def create_store(body: StoreBody, db: DbDep) -> StoreOut:
    return present_store(CreateStoreHandler(db).handle(name=body.name, user_id=body.user_id))


@router.patch("/{store_id}", summary="Rename a store")
def rename_store(store_id: str, body: StoreRenameBody, db: DbDep) -> StoreOut:
    return present_store(RenameStoreHandler(db).handle(store_id, name=body.name))


@router.delete("/{store_id}", summary="Delete an empty store")
def delete_store(store_id: str, db: DbDep) -> StoreOut:
    return present_store(DeleteStoreHandler(db).handle(store_id))
