"""In-memory fakes for testing.

The fake repository implements the same abstract interface as the JSON
repository but keeps everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ecom.application.feedback import Navigator, Toaster
from ecom.domain.model.billboard import Billboard
from ecom.domain.model.category import Category
from ecom.domain.model.color import Color
from ecom.domain.model.product import Product
from ecom.domain.model.size import Size
from ecom.domain.model.store import Store
from ecom.domain.model.value_objects import Money
from ecom.domain.repository.record_store import RecordStore
from ecom.domain.repository.repository import Repository

T = TypeVar("T")


class FakeRepository(Repository[T], Generic[T]):

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}

    def get_by_id(self, entity_id: str) -> T | None:
        return self._store.get(entity_id)

    def list_all(self) -> list[T]:
        return list(self._store.values())

    def save(self, entity: T) -> None:
        self._store[entity.id] = entity  # type: ignore[attr-defined]

    def delete(self, entity_id: str) -> None:
        self._store.pop(entity_id, None)


def make_record_store() -> RecordStore:
    return RecordStore(
        stores=FakeRepository(),
        billboards=FakeRepository(),
        categories=FakeRepository(),
        colors=FakeRepository(),
        sizes=FakeRepository(),
        products=FakeRepository(),
        orders=FakeRepository(),
    )


@dataclass
class Catalog:
    """IDs of one fully wired set of catalog records."""

    store: Store
    billboard: Billboard
    category: Category
    color: Color
    size: Size
    product: Product


def seed_catalog(db: RecordStore, price: str = "25.00") -> Catalog:
    store = Store.create(name="Main Street", user_id="user_1")
    db.stores.save(store)
    billboard = Billboard.create(store.id, label="Summer", image_url="https://img/summer.png")
    db.billboards.save(billboard)
    category = Category.create(store.id, billboard_id=billboard.id, name="Shirts")
    db.categories.save(category)
    color = Color.create(store.id, name="Red", value="#ff0000")
    db.colors.save(color)
    size = Size.create(store.id, name="Large", value="L")
    db.sizes.save(size)
    product = Product.create(
        store_id=store.id,
        name="Linen Shirt",
        price=Money.of(price),
        category_id=category.id,
        size_id=size.id,
        color_id=color.id,
        image_urls=["https://img/shirt.png"],
    )
    db.products.save(product)
    return Catalog(store, billboard, category, color, size, product)


class RecordingToaster(Toaster):

    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class RecordingNavigator(Navigator):

    def __init__(self) -> None:
        self.pushed: list[str] = []
        self.refreshes = 0

    def push(self, path: str) -> None:
        self.pushed.append(path)

    def refresh(self) -> None:
        self.refreshes += 1
