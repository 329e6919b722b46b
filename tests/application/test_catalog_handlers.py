"""Unit tests for store and catalog use cases (stores, billboards, categories, colors, sizes, products)."""

import pytest

from ecom.application.billboards import CreateBillboardHandler, DeleteBillboardHandler
from ecom.application.categories import CreateCategoryHandler, UpdateCategoryHandler
from ecom.application.colors import CreateColorHandler, DeleteColorHandler, UpdateColorHandler
from ecom.application.dto import ProductSpec
from ecom.application.products import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from ecom.application.sizes import CreateSizeHandler, DeleteSizeHandler
from ecom.application.stores import CreateStoreHandler, DeleteStoreHandler, RenameStoreHandler
from ecom.domain.exceptions import EntityNotFoundError, IntegrityError, ValidationError
from ecom.domain.model.value_objects import Money
from tests.fakes import make_record_store, seed_catalog


class TestStores:

    def test_create_and_rename(self):
        db = make_record_store()
        store = CreateStoreHandler(db).handle(name="Main Street", user_id="user_1")
        RenameStoreHandler(db).handle(store.id, name="High Street")
        assert db.stores.get_by_id(store.id).name == "High Street"

    def test_rename_unknown_store(self):
        db = make_record_store()
        with pytest.raises(EntityNotFoundError, match="Store 'nope' not found"):
            RenameStoreHandler(db).handle("nope", name="x")

    def test_delete_empty_store(self):
        db = make_record_store()
        store = CreateStoreHandler(db).handle(name="Main Street", user_id="user_1")
        DeleteStoreHandler(db).handle(store.id)
        assert db.stores.get_by_id(store.id) is None


class TestColorHandlers:

    def _setup(self):
        db = make_record_store()
        store = CreateStoreHandler(db).handle(name="Main Street", user_id="user_1")
        return db, store.id

    def test_create(self):
        db, store_id = self._setup()
        color = CreateColorHandler(db).handle(store_id, name="Red", value="#ff0000")
        assert db.colors.get_by_id(color.id).value == "#ff0000"

    def test_create_requires_store(self):
        db, _ = self._setup()
        with pytest.raises(EntityNotFoundError):
            CreateColorHandler(db).handle("missing", name="Red", value="#ff0000")

    def test_create_rejects_invalid_hex(self):
        db, store_id = self._setup()
        with pytest.raises(ValidationError, match="valid hexcode"):
            CreateColorHandler(db).handle(store_id, name="Red", value="red")
        assert db.colors.find_many() == []

    def test_update(self):
        db, store_id = self._setup()
        color = CreateColorHandler(db).handle(store_id, name="Red", value="#ff0000")
        UpdateColorHandler(db).handle(store_id, color.id, name="Navy", value="#000080")
        saved = db.colors.get_by_id(color.id)
        assert (saved.name, saved.value) == ("Navy", "#000080")

    def test_update_from_another_store_is_not_found(self):
        db, store_id = self._setup()
        other = CreateStoreHandler(db).handle(name="Other", user_id="user_2")
        color = CreateColorHandler(db).handle(store_id, name="Red", value="#ff0000")
        with pytest.raises(EntityNotFoundError, match="Color"):
            UpdateColorHandler(db).handle(other.id, color.id, name="Navy", value="#000080")

    def test_delete_unused(self):
        db, store_id = self._setup()
        color = CreateColorHandler(db).handle(store_id, name="Red", value="#ff0000")
        deleted = DeleteColorHandler(db).handle(store_id, color.id)
        assert deleted.id == color.id
        assert db.colors.get_by_id(color.id) is None

    def test_delete_in_use_fails(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(IntegrityError):
            DeleteColorHandler(db).handle(catalog.store.id, catalog.color.id)


class TestOtherCatalogHandlers:

    def test_size_delete_in_use_fails(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(IntegrityError):
            DeleteSizeHandler(db).handle(catalog.store.id, catalog.size.id)

    def test_size_create(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        size = CreateSizeHandler(db).handle(catalog.store.id, name="Small", value="S")
        assert db.sizes.get_by_id(size.id).value == "S"

    def test_billboard_delete_in_use_fails(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(IntegrityError):
            DeleteBillboardHandler(db).handle(catalog.store.id, catalog.billboard.id)

    def test_billboard_create(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        billboard = CreateBillboardHandler(db).handle(
            catalog.store.id, label="Winter", image_url="https://img/winter.png"
        )
        assert db.billboards.get_by_id(billboard.id).label == "Winter"

    def test_category_needs_billboard_in_same_store(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        other = CreateStoreHandler(db).handle(name="Other", user_id="user_2")
        with pytest.raises(IntegrityError):
            CreateCategoryHandler(db).handle(
                other.id, name="Hats", billboard_id=catalog.billboard.id
            )

    def test_category_update_moves_billboard(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        winter = CreateBillboardHandler(db).handle(
            catalog.store.id, label="Winter", image_url="https://img/winter.png"
        )
        UpdateCategoryHandler(db).handle(
            catalog.store.id, catalog.category.id, name="Coats", billboard_id=winter.id
        )
        category = db.categories.get_by_id(catalog.category.id)
        assert (category.name, category.billboard_id) == ("Coats", winter.id)


def _spec(catalog, **overrides) -> ProductSpec:
    fields = dict(
        name="Wool Coat",
        price="120.00",
        category_id=catalog.category.id,
        size_id=catalog.size.id,
        color_id=catalog.color.id,
        image_urls=["https://img/coat.png"],
    )
    fields.update(overrides)
    return ProductSpec(**fields)


class TestProductHandlers:

    def test_create(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        product = CreateProductHandler(db).handle(catalog.store.id, _spec(catalog))
        saved = db.products.get_by_id(product.id)
        assert saved.price == Money.of("120.00")
        assert [image.url for image in saved.images] == ["https://img/coat.png"]

    def test_create_with_unknown_color_fails(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(IntegrityError, match="color_id"):
            CreateProductHandler(db).handle(catalog.store.id, _spec(catalog, color_id="nope"))

    def test_create_with_bad_price_fails(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(ValidationError, match="Invalid money amount"):
            CreateProductHandler(db).handle(catalog.store.id, _spec(catalog, price="abc"))

    def test_update(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        UpdateProductHandler(db).handle(
            catalog.store.id,
            catalog.product.id,
            _spec(catalog, name="Linen Shirt", price="30.00", is_featured=True),
        )
        saved = db.products.get_by_id(catalog.product.id)
        assert saved.price == Money.of("30.00")
        assert saved.is_featured

    def test_delete(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        DeleteProductHandler(db).handle(catalog.store.id, catalog.product.id)
        assert db.products.get_by_id(catalog.product.id) is None
