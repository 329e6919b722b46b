"""Column declarations for the admin data tables.

Each declaration maps a field of a ``*Column`` row to the header shown
above it. Column order is display order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Column:
    accessor_key: str
    header: str


BILLBOARD_COLUMNS: tuple[Column, ...] = (
    Column("label", "Label"),
    Column("created_at", "Date"),
)

CATEGORY_COLUMNS: tuple[Column, ...] = (
    Column("name", "Name"),
    Column("billboard_label", "Billboard"),
    Column("created_at", "Date"),
)

COLOR_COLUMNS: tuple[Column, ...] = (
    Column("name", "Name"),
    Column("value", "Value"),
    Column("created_at", "Date"),
)

SIZE_COLUMNS: tuple[Column, ...] = (
    Column("name", "Name"),
    Column("value", "Value"),
    Column("created_at", "Date"),
)

PRODUCT_COLUMNS: tuple[Column, ...] = (
    Column("name", "Name"),
    Column("is_archived", "Archived"),
    Column("is_featured", "Featured"),
    Column("price", "Price"),
    Column("category", "Category"),
    Column("size", "Size"),
    Column("color", "Color"),
    Column("created_at", "Date"),
)

ORDER_COLUMNS: tuple[Column, ...] = (
    Column("products", "Products"),
    Column("phone", "Mobile.No"),
    Column("address", "Address"),
    Column("total_price", "Total Price"),
    Column("is_paid", "Paid"),
)
