"""Record <-> JSON dict conversion for every table."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from ecom.domain.model.billboard import Billboard
from ecom.domain.model.category import Category
from ecom.domain.model.color import Color
from ecom.domain.model.order import Order, OrderItem
from ecom.domain.model.product import Image, Product
from ecom.domain.model.size import Size
from ecom.domain.model.store import Store
from ecom.domain.model.value_objects import Money


def _timestamps(entity: Any) -> dict[str, str]:
    return {
        "created_at": entity.created_at.isoformat(),
        "updated_at": entity.updated_at.isoformat(),
    }


def _parse_timestamps(raw: dict[str, Any]) -> dict[str, datetime]:
    return {
        "created_at": datetime.fromisoformat(raw["created_at"]),
        "updated_at": datetime.fromisoformat(raw["updated_at"]),
    }


# --- Store --------------------------------------------------------------------


def store_to_raw(store: Store) -> dict[str, Any]:
    return {"id": store.id, "name": store.name, "user_id": store.user_id, **_timestamps(store)}


def store_to_domain(raw: dict[str, Any]) -> Store:
    return Store(id=raw["id"], name=raw["name"], user_id=raw["user_id"], **_parse_timestamps(raw))


# --- Billboard ----------------------------------------------------------------


def billboard_to_raw(billboard: Billboard) -> dict[str, Any]:
    return {
        "id": billboard.id,
        "store_id": billboard.store_id,
        "label": billboard.label,
        "image_url": billboard.image_url,
        **_timestamps(billboard),
    }


def billboard_to_domain(raw: dict[str, Any]) -> Billboard:
    return Billboard(
        id=raw["id"],
        store_id=raw["store_id"],
        label=raw["label"],
        image_url=raw["image_url"],
        **_parse_timestamps(raw),
    )


# --- Category -----------------------------------------------------------------


def category_to_raw(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "store_id": category.store_id,
        "billboard_id": category.billboard_id,
        "name": category.name,
        **_timestamps(category),
    }


def category_to_domain(raw: dict[str, Any]) -> Category:
    return Category(
        id=raw["id"],
        store_id=raw["store_id"],
        billboard_id=raw["billboard_id"],
        name=raw["name"],
        **_parse_timestamps(raw),
    )


# --- Color / Size -------------------------------------------------------------


def color_to_raw(color: Color) -> dict[str, Any]:
    return {
        "id": color.id,
        "store_id": color.store_id,
        "name": color.name,
        "value": color.value,
        **_timestamps(color),
    }


def color_to_domain(raw: dict[str, Any]) -> Color:
    return Color(
        id=raw["id"],
        store_id=raw["store_id"],
        name=raw["name"],
        value=raw["value"],
        **_parse_timestamps(raw),
    )


def size_to_raw(size: Size) -> dict[str, Any]:
    return {
        "id": size.id,
        "store_id": size.store_id,
        "name": size.name,
        "value": size.value,
        **_timestamps(size),
    }


def size_to_domain(raw: dict[str, Any]) -> Size:
    return Size(
        id=raw["id"],
        store_id=raw["store_id"],
        name=raw["name"],
        value=raw["value"],
        **_parse_timestamps(raw),
    )


# --- Product ------------------------------------------------------------------


def product_to_raw(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "store_id": product.store_id,
        "category_id": product.category_id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "size_id": product.size_id,
        "color_id": product.color_id,
        "images": [{"id": image.id, "url": image.url} for image in product.images],
        "is_featured": product.is_featured,
        "is_archived": product.is_archived,
        **_timestamps(product),
    }


def product_to_domain(raw: dict[str, Any]) -> Product:
    return Product(
        id=raw["id"],
        store_id=raw["store_id"],
        category_id=raw["category_id"],
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        size_id=raw["size_id"],
        color_id=raw["color_id"],
        images=[Image(id=i["id"], url=i["url"]) for i in raw.get("images", [])],
        is_featured=raw.get("is_featured", False),
        is_archived=raw.get("is_archived", False),
        **_parse_timestamps(raw),
    )


# --- Order --------------------------------------------------------------------


def order_to_raw(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "store_id": order.store_id,
        "is_paid": order.is_paid,
        "phone": order.phone,
        "address": order.address,
        "items": [{"id": item.id, "product_id": item.product_id} for item in order.items],
        **_timestamps(order),
    }


def order_to_domain(raw: dict[str, Any]) -> Order:
    return Order(
        id=raw["id"],
        store_id=raw["store_id"],
        items=[
            OrderItem(id=i["id"], order_id=raw["id"], product_id=i["product_id"])
            for i in raw["items"]
        ],
        is_paid=raw.get("is_paid", False),
        phone=raw.get("phone", ""),
        address=raw.get("address", ""),
        **_parse_timestamps(raw),
    )
