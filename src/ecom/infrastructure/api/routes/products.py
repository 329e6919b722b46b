"""Product routes: /api/{store_id}/products.

The list endpoint is also the storefront's product feed, so it hides
archived products and accepts the storefront filters.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from ecom.application.common import require_record, require_store
from ecom.application.dto import ProductSpec
from ecom.application.products import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_product
from ecom.infrastructure.api.schemas import ProductBody, ProductOut

router = APIRouter(prefix="/{store_id}/products", tags=["products"])


def _spec(body: ProductBody) -> ProductSpec:
    return ProductSpec(
        name=body.name,
        price=str(body.price),
        category_id=body.category_id,
        size_id=body.size_id,
        color_id=body.color_id,
        image_urls=[image.url for image in body.images],
        is_featured=body.is_featured,
        is_archived=body.is_archived,
    )


@router.get("", summary="List a store's available products")
def list_products(
    store_id: str,
    db: DbDep,
    category_id: str | None = Query(None, alias="categoryId"),
    color_id: str | None = Query(None, alias="colorId"),
    size_id: str | None = Query(None, alias="sizeId"),
    is_featured: bool | None = Query(None, alias="isFeatured"),
) -> list[ProductOut]:
    require_store(db, store_id)
    where: dict[str, Any] = {"store_id": store_id, "is_archived": False}
    if category_id:
        where["category_id"] = category_id
    if color_id:
        where["color_id"] = color_id
    if size_id:
        where["size_id"] = size_id
    # Only ``true`` narrows the feed; ``false`` means "any".
    if is_featured:
        where["is_featured"] = True
    products = db.products.find_many(where=where, order_by={"created_at": "desc"})
    return [present_product(product, db) for product in products]


@router.get("/{product_id}", summary="Get one product with its relations")
def get_product(store_id: str, product_id: str, db: DbDep) -> ProductOut:
    product = require_record(db.products, product_id, store_id, "Product")
    return present_product(product, db)


@router.post("", summary="Create a product")
def create_product(store_id: str, body: ProductBody, db: DbDep) -> ProductOut:
    product = CreateProductHandler(db).handle(store_id, _spec(body))
    return present_product(product, db)


@router.patch("/{product_id}", summary="Update a product")
def update_product(
    store_id: str, product_id: str, body: ProductBody, db: DbDep
) -> ProductOut:
    product = UpdateProductHandler(db).handle(store_id, product_id, _spec(body))
    return present_product(product, db)


@router.delete("/{product_id}", summary="Delete a product")
def delete_product(store_id: str, product_id: str, db: DbDep) -> ProductOut:
    product = DeleteProductHandler(db).handle(store_id, product_id)
    return present_product(product, db)
