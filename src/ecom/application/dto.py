"""Data Transfer Objects: plain containers that cross layer boundaries.

``*Column`` rows are what listing pages hand to the data table; every
value is already formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductSpec:
    """Input: the editable fields of a product as submitted by the admin."""

    name: str
    price: str
    category_id: str
    size_id: str
    color_id: str
    image_urls: list[str] = field(default_factory=list)
    is_featured: bool = False
    is_archived: bool = False


@dataclass(frozen=True)
class BillboardColumn:
    id: str
    label: str
    created_at: str


@dataclass(frozen=True)
class CategoryColumn:
    id: str
    name: str
    billboard_label: str
    created_at: str


@dataclass(frozen=True)
class ColorColumn:
    id: str
    name: str
    value: str
    created_at: str


@dataclass(frozen=True)
class SizeColumn:
    id: str
    name: str
    value: str
    created_at: str


@dataclass(frozen=True)
class ProductColumn:
    id: str
    name: str
    is_featured: bool
    is_archived: bool
    price: str  # formatted, e.g. "$1,250.00"
    category: str
    size: str
    color: str  # hex value, rendered as a swatch
    created_at: str


@dataclass(frozen=True)
class OrderColumn:
    id: str
    phone: str
    address: str
    is_paid: bool
    products: str  # product names joined with ", "
    total_price: str
    created_at: str
