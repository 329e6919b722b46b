"""Record store: one table per entity plus the foreign keys between them.

Handlers talk to the store the way they would talk to an ORM client
(``db.colors.find_many(...)``, ``db.colors.delete(id)``). Every write goes
through a ``Table`` so relations are checked no matter which repository
implementation sits underneath.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ecom.domain.exceptions import EntityNotFoundError, IntegrityError
from ecom.domain.model.billboard import Billboard
from ecom.domain.model.category import Category
from ecom.domain.model.color import Color
from ecom.domain.model.order import Order
from ecom.domain.model.product import Product
from ecom.domain.model.size import Size
from ecom.domain.model.store import Store
from ecom.domain.repository.query import OrderBy
from ecom.domain.repository.repository import Repository

T = TypeVar("T")


@dataclass(frozen=True)
class Relation:
    """``table.field`` holds the id (or list of ids) of a ``target`` record."""

    table: str
    field: str
    target: str


STORE_SCOPED_TABLES = ("billboards", "categories", "colors", "sizes", "products", "orders")

RELATIONS: tuple[Relation, ...] = (
    *(Relation(table, "store_id", "stores") for table in STORE_SCOPED_TABLES),
    Relation("categories", "billboard_id", "billboards"),
    Relation("products", "category_id", "categories"),
    Relation("products", "size_id", "sizes"),
    Relation("products", "color_id", "colors"),
    Relation("orders", "product_ids", "products"),
)


def _keys(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class Table(Generic[T]):

    def __init__(self, name: str, repository: Repository[T], store: RecordStore) -> None:
        self.name = name
        self._repository = repository
        self._store = store

    def get_by_id(self, entity_id: str) -> T | None:
        return self._repository.get_by_id(entity_id)

    def find_unique(self, entity_id: str, store_id: str | None = None) -> T | None:
        """Return the record, or None if missing or owned by another store."""
        entity = self._repository.get_by_id(entity_id)
        if entity is None:
            return None
        if store_id is not None and getattr(entity, "store_id", None) != store_id:
            return None
        return entity

    def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: OrderBy | None = None,
    ) -> list[T]:
        return self._repository.find_many(where=where, order_by=order_by)

    def save(self, entity: T) -> None:
        self._store.check_references(self.name, entity)
        self._repository.save(entity)

    def delete(self, entity_id: str) -> T:
        entity = self._repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(f"No {self.name} record with id '{entity_id}'")
        self._store.check_unreferenced(self.name, entity_id)
        self._repository.delete(entity_id)
        return entity


class RecordStore:

    def __init__(
        self,
        stores: Repository[Store],
        billboards: Repository[Billboard],
        categories: Repository[Category],
        colors: Repository[Color],
        sizes: Repository[Size],
        products: Repository[Product],
        orders: Repository[Order],
    ) -> None:
        self.stores: Table[Store] = Table("stores", stores, self)
        self.billboards: Table[Billboard] = Table("billboards", billboards, self)
        self.categories: Table[Category] = Table("categories", categories, self)
        self.colors: Table[Color] = Table("colors", colors, self)
        self.sizes: Table[Size] = Table("sizes", sizes, self)
        self.products: Table[Product] = Table("products", products, self)
        self.orders: Table[Order] = Table("orders", orders, self)

    def table(self, name: str) -> Table[Any]:
        table = getattr(self, name, None)
        if not isinstance(table, Table):
            raise KeyError(name)
        return table

    def check_references(self, table: str, entity: Any) -> None:
        """Every foreign key on *entity* must point at a record of the same store."""
        for relation in RELATIONS:
            if relation.table != table:
                continue
            for key in _keys(getattr(entity, relation.field)):
                target = self.table(relation.target).get_by_id(key)
                if target is None:
                    raise IntegrityError(
                        f"Foreign key constraint failed on {table}.{relation.field}: "
                        f"no {relation.target} record '{key}'"
                    )
                if relation.target != "stores" and target.store_id != entity.store_id:
                    raise IntegrityError(
                        f"Foreign key constraint failed on {table}.{relation.field}: "
                        f"{relation.target} record '{key}' belongs to another store"
                    )

    def check_unreferenced(self, table: str, entity_id: str) -> None:
        for relation in RELATIONS:
            if relation.target != table:
                continue
            for record in self.table(relation.table).find_many():
                if entity_id in _keys(getattr(record, relation.field)):
                    raise IntegrityError(
                        f"Foreign key constraint failed: {table} record '{entity_id}' "
                        f"is still used by {relation.table}"
                    )
