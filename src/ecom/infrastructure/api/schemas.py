"""Request and response bodies of the admin API.

Everything is camelCase on the wire; Python code uses the snake_case
field names.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request bodies -----------------------------------------------------------


class StoreBody(ApiSchema):
    name: str
    user_id: str


class StoreRenameBody(ApiSchema):
    name: str


class BillboardBody(ApiSchema):
    label: str
    image_url: str


class CategoryBody(ApiSchema):
    name: str
    billboard_id: str


class ColorBody(ApiSchema):
    name: str
    value: str


class SizeBody(ApiSchema):
    name: str
    value: str


class ImageBody(ApiSchema):
    url: str


class ProductBody(ApiSchema):
    name: str
    price: Decimal
    category_id: str
    color_id: str
    size_id: str
    images: list[ImageBody] = []
    is_featured: bool = False
    is_archived: bool = False


class CheckoutBody(ApiSchema):
    product_ids: list[str]
    phone: str = ""
    address: str = ""


class PaymentBody(ApiSchema):
    is_paid: bool = True
    phone: str | None = None
    address: str | None = None


# --- Responses ----------------------------------------------------------------


class StoreOut(ApiSchema):
    id: str
    name: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class BillboardOut(ApiSchema):
    id: str
    store_id: str
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime


class CategoryOut(ApiSchema):
    id: str
    store_id: str
    billboard_id: str
    name: str
    billboard: BillboardOut | None = None
    created_at: datetime
    updated_at: datetime


class ColorOut(ApiSchema):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


class SizeOut(ApiSchema):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


class ImageOut(ApiSchema):
    id: str
    url: str


class ProductOut(ApiSchema):
    id: str
    store_id: str
    category_id: str
    size_id: str
    color_id: str
    name: str
    price: str
    is_featured: bool
    is_archived: bool
    images: list[ImageOut]
    category: CategoryOut | None = None
    size: SizeOut | None = None
    color: ColorOut | None = None
    created_at: datetime
    updated_at: datetime


class OrderItemOut(ApiSchema):
    id: str
    product_id: str


class OrderOut(ApiSchema):
    id: str
    store_id: str
    is_paid: bool
    phone: str
    address: str
    items: list[OrderItemOut]
    created_at: datetime
    updated_at: datetime
