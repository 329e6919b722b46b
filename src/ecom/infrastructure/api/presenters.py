"""Domain record -> response body mapping.

Products and categories embed their related records the way the
storefront expects to read them.
"""

from __future__ import annotations

from ecom.domain.model.billboard import Billboard
from ecom.domain.model.category import Category
from ecom.domain.model.color import Color
from ecom.domain.model.order import Order
from ecom.domain.model.product import Product
from ecom.domain.model.size import Size
from ecom.domain.model.store import Store
from ecom.domain.repository.record_store import RecordStore
from ecom.infrastructure.api.schemas import (
    BillboardOut,
    CategoryOut,
    ColorOut,
    ImageOut,
    OrderItemOut,
    OrderOut,
    ProductOut,
    SizeOut,
    StoreOut,
)


def present_store(store: Store) -> StoreOut:
    return StoreOut(
        id=store.id,
        name=store.name,
        user_id=store.user_id,
        created_at=store.created_at,
        updated_at=store.updated_at,
    )


def present_billboard(billboard: Billboard) -> BillboardOut:
    return BillboardOut(
        id=billboard.id,
        store_id=billboard.store_id,
        label=billboard.label,
        image_url=billboard.image_url,
        created_at=billboard.created_at,
        updated_at=billboard.updated_at,
    )


def present_category(category: Category, db: RecordStore) -> CategoryOut:
    billboard = db.billboards.get_by_id(category.billboard_id)
    return CategoryOut(
        id=category.id,
        store_id=category.store_id,
        billboard_id=category.billboard_id,
        name=category.name,
        billboard=present_billboard(billboard) if billboard else None,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def present_color(color: Color) -> ColorOut:
    return ColorOut(
        id=color.id,
        store_id=color.store_id,
        name=color.name,
        value=color.value,
        created_at=color.created_at,
        updated_at=color.updated_at,
    )


def present_size(size: Size) -> SizeOut:
    return SizeOut(
        id=size.id,
        store_id=size.store_id,
        name=size.name,
        value=size.value,
        created_at=size.created_at,
        updated_at=size.updated_at,
    )


def present_product(product: Product, db: RecordStore) -> ProductOut:
    category = db.categories.get_by_id(product.category_id)
    size = db.sizes.get_by_id(product.size_id)
    color = db.colors.get_by_id(product.color_id)
    return ProductOut(
        id=product.id,
        store_id=product.store_id,
        category_id=product.category_id,
        size_id=product.size_id,
        color_id=product.color_id,
        name=product.name,
        price=str(product.price.amount),
        is_featured=product.is_featured,
        is_archived=product.is_archived,
        images=[ImageOut(id=image.id, url=image.url) for image in product.images],
        category=present_category(category, db) if category else None,
        size=present_size(size) if size else None,
        color=present_color(color) if color else None,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def present_order(order: Order) -> OrderOut:
    return OrderOut(
        id=order.id,
        store_id=order.store_id,
        is_paid=order.is_paid,
        phone=order.phone,
        address=order.address,
        items=[OrderItemOut(id=item.id, product_id=item.product_id) for item in order.items],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
