"""Category routes: /api/{store_id}/categories."""

from __future__ import annotations

from fastapi import APIRouter

from ecom.application.categories import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    UpdateCategoryHandler,
)
from ecom.application.common import require_record, require_store
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_category
from ecom.infrastructure.api.schemas import CategoryBody, CategoryOut

router = APIRouter(prefix="/{store_id}/categories", tags=["categories"])


@router.get("", summary="List a store's categories")
def list_categories(store_id: str, db: DbDep) -> list[CategoryOut]:
    require_store(db, store_id)
    categories = db.categories.find_many(
        where={"store_id": store_id},
        order_by={"created_at": "desc"},
    )
    return [present_category(category, db) for category in categories]


@router.get("/{category_id}", summary="Get one category with its billboard")
def get_category(store_id: str, category_id: str, db: DbDep) -> CategoryOut:
    category = require_record(db.categories, category_id, store_id, "Category")
    return present_category(category, db)


@router.post("", summary="Create a category")
def create_category(store_id: str, body: CategoryBody, db: DbDep) -> CategoryOut:
    category = CreateCategoryHandler(db).handle(
        store_id, name=body.name, billboard_id=body.billboard_id
    )
    return present_category(category, db)


@router.patch("/{category_id}", summary="Update a category")
def update_category(
    store_id: str, category_id: str, body: CategoryBody, db: DbDep
) -> CategoryOut:
    category = UpdateCategoryHandler(db).handle(
        store_id, category_id, name=body.name, billboard_id=body.billboard_id
    )
    return present_category(category, db)


@router.delete("/{category_id}", summary="Delete a category")
def delete_category(store_id: str, category_id: str, db: DbDep) -> CategoryOut:
    category = DeleteCategoryHandler(db).handle(store_id, category_id)
    return present_category(category, db)
