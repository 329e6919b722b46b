"""Product aggregate.

A product belongs to one category and carries one size and one color.
Archived products stay in the admin listing but are hidden from the
storefront.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money, new_id, require_text, utc_now


@dataclass(frozen=True)
class Image:
    id: str
    url: str

    @staticmethod
    def create(url: str) -> Image:
        return Image(id=new_id(), url=require_text(url, "Image URL"))


@dataclass
class Product:

    id: str
    store_id: str
    category_id: str
    name: str
    price: Money
    size_id: str
    color_id: str
    images: list[Image] = field(default_factory=list)
    is_featured: bool = False
    is_archived: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(
        store_id: str,
        name: str,
        price: Money,
        category_id: str,
        size_id: str,
        color_id: str,
        image_urls: list[str] | None = None,
        is_featured: bool = False,
        is_archived: bool = False,
    ) -> Product:
        if not price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        return Product(
            id=new_id(),
            store_id=store_id,
            category_id=require_text(category_id, "Category id"),
            name=require_text(name, "Name"),
            price=price,
            size_id=require_text(size_id, "Size id"),
            color_id=require_text(color_id, "Color id"),
            images=[Image.create(url) for url in image_urls or []],
            is_featured=is_featured,
            is_archived=is_archived,
        )

    def update(
        self,
        name: str,
        price: Money,
        category_id: str,
        size_id: str,
        color_id: str,
        image_urls: list[str],
        is_featured: bool,
        is_archived: bool,
    ) -> None:
        """Replace every editable field; images are replaced wholesale."""
        if not price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        self.name = require_text(name, "Name")
        self.price = price
        self.category_id = require_text(category_id, "Category id")
        self.size_id = require_text(size_id, "Size id")
        self.color_id = require_text(color_id, "Color id")
        self.images = [Image.create(url) for url in image_urls]
        self.is_featured = is_featured
        self.is_archived = is_archived
        self.updated_at = utc_now()

    def archive(self) -> None:
        self.is_archived = True
        self.updated_at = utc_now()
