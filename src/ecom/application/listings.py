"""Application service: listing pages (queries).

Each handler reads one store's records newest first and formats them into
``*Column`` rows for the data table.
"""

from __future__ import annotations

from ecom.application.common import require_store
from ecom.application.dto import (
    BillboardColumn,
    CategoryColumn,
    ColorColumn,
    OrderColumn,
    ProductColumn,
    SizeColumn,
)
from ecom.application.formatting import format_date
from ecom.domain.model.value_objects import Money
from ecom.domain.repository.record_store import RecordStore

NEWEST_FIRST = {"created_at": "desc"}


class ListBillboardsHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[BillboardColumn]:
        require_store(self._db, store_id)
        billboards = self._db.billboards.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        return [
            BillboardColumn(
                id=item.id,
                label=item.label,
                created_at=format_date(item.created_at),
            )
            for item in billboards
        ]


class ListCategoriesHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[CategoryColumn]:
        require_store(self._db, store_id)
        categories = self._db.categories.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        rows: list[CategoryColumn] = []
        for item in categories:
            billboard = self._db.billboards.get_by_id(item.billboard_id)
            rows.append(
                CategoryColumn(
                    id=item.id,
                    name=item.name,
                    billboard_label=billboard.label if billboard else "",
                    created_at=format_date(item.created_at),
                )
            )
        return rows


class ListColorsHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[ColorColumn]:
        require_store(self._db, store_id)
        colors = self._db.colors.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        return [
            ColorColumn(
                id=item.id,
                name=item.name,
                value=item.value,
                created_at=format_date(item.created_at),
            )
            for item in colors
        ]


class ListSizesHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[SizeColumn]:
        require_store(self._db, store_id)
        sizes = self._db.sizes.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        return [
            SizeColumn(
                id=item.id,
                name=item.name,
                value=item.value,
                created_at=format_date(item.created_at),
            )
            for item in sizes
        ]


class ListProductsHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[ProductColumn]:
        require_store(self._db, store_id)
        products = self._db.products.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        rows: list[ProductColumn] = []
        for item in products:
            category = self._db.categories.get_by_id(item.category_id)
            size = self._db.sizes.get_by_id(item.size_id)
            color = self._db.colors.get_by_id(item.color_id)
            rows.append(
                ProductColumn(
                    id=item.id,
                    name=item.name,
                    is_featured=item.is_featured,
                    is_archived=item.is_archived,
                    price=str(item.price),
                    category=category.name if category else "",
                    size=size.name if size else "",
                    color=color.value if color else "",
                    created_at=format_date(item.created_at),
                )
            )
        return rows


class ListOrdersHandler:

    def __init__(self, db: RecordStore) -> None:
        self._db = db

    def handle(self, store_id: str) -> list[OrderColumn]:
        require_store(self._db, store_id)
        orders = self._db.orders.find_many(
            where={"store_id": store_id},
            order_by=NEWEST_FIRST,
        )
        rows: list[OrderColumn] = []
        for order in orders:
            names: list[str] = []
            total = Money.zero()
            for item in order.items:
                product = self._db.products.get_by_id(item.product_id)
                if product is None:
                    continue
                names.append(product.name)
                total = total + product.price
            rows.append(
                OrderColumn(
                    id=order.id,
                    phone=order.phone,
                    address=order.address,
                    is_paid=order.is_paid,
                    products=", ".join(names),
                    total_price=str(total),
                    created_at=format_date(order.created_at),
                )
            )
        return rows
