"""Tests for the admin API routes and their error mapping."""

import pytest
from fastapi.testclient import TestClient

from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money
from ecom.infrastructure.api.app import create_app
from tests.fakes import make_record_store, seed_catalog


@pytest.fixture
def db():
    return make_record_store()


@pytest.fixture
def catalog(db):
    return seed_catalog(db)


@pytest.fixture
def client(db):
    return TestClient(create_app(db))


class TestStores:

    def test_create_and_get(self, client):
        created = client.post("/api/stores", json={"name": "Main Street", "userId": "u1"})
        assert created.status_code == 200
        store_id = created.json()["id"]

        fetched = client.get(f"/api/stores/{store_id}").json()
        assert fetched["name"] == "Main Street"
        assert fetched["userId"] == "u1"

    def test_list_by_user(self, client):
        client.post("/api/stores", json={"name": "A", "userId": "u1"})
        client.post("/api/stores", json={"name": "B", "userId": "u2"})
        names = [s["name"] for s in client.get("/api/stores", params={"userId": "u2"}).json()]
        assert names == ["B"]

    def test_delete_store_with_records_conflicts(self, client, catalog):
        response = client.delete(f"/api/stores/{catalog.store.id}")
        assert response.status_code == 409


class TestColors:

    def test_list_unknown_store(self, client):
        response = client.get("/api/nope/colors")
        assert response.status_code == 404
        assert response.json() == {"detail": "Store 'nope' not found"}

    def test_create_invalid_hex(self, client, catalog):
        response = client.post(
            f"/api/{catalog.store.id}/colors", json={"name": "Blue", "value": "blue"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "String must be a valid hexcode"

    def test_missing_field(self, client, catalog):
        response = client.post(f"/api/{catalog.store.id}/colors", json={"name": "Blue"})
        assert response.status_code == 422

    def test_response_is_camel_case(self, client, catalog):
        body = client.get(f"/api/{catalog.store.id}/colors/{catalog.color.id}").json()
        assert body["storeId"] == catalog.store.id
        assert "createdAt" in body

    def test_other_stores_color_is_not_found(self, client, db, catalog):
        other = seed_catalog(db)
        response = client.get(f"/api/{other.store.id}/colors/{catalog.color.id}")
        assert response.status_code == 404

    def test_delete_used_color_conflicts(self, client, db, catalog):
        response = client.delete(f"/api/{catalog.store.id}/colors/{catalog.color.id}")
        assert response.status_code == 409
        assert db.colors.get_by_id(catalog.color.id) is not None


class TestCategories:

    def test_embeds_billboard(self, client, catalog):
        body = client.get(f"/api/{catalog.store.id}/categories/{catalog.category.id}").json()
        assert body["billboard"]["label"] == "Summer"
        assert body["billboard"]["imageUrl"] == "https://img/summer.png"


class TestProductFeed:

    def _add(self, db, catalog, name, **flags):
        product = Product.create(
            store_id=catalog.store.id,
            name=name,
            price=Money.of("10"),
            category_id=catalog.category.id,
            size_id=catalog.size.id,
            color_id=catalog.color.id,
            image_urls=["https://img/x.png"],
            **flags,
        )
        db.products.save(product)
        return product

    def _names(self, client, catalog, **params):
        response = client.get(f"/api/{catalog.store.id}/products", params=params)
        assert response.status_code == 200
        return sorted(p["name"] for p in response.json())

    def test_hides_archived(self, client, db, catalog):
        self._add(db, catalog, "Old Hat", is_archived=True)
        assert self._names(client, catalog) == ["Linen Shirt"]

    def test_featured_filter(self, client, db, catalog):
        self._add(db, catalog, "Star Jacket", is_featured=True)
        assert self._names(client, catalog, isFeatured="true") == ["Star Jacket"]
        assert self._names(client, catalog, isFeatured="false") == ["Linen Shirt", "Star Jacket"]

    def test_category_filter(self, client, catalog):
        assert self._names(client, catalog, categoryId=catalog.category.id) == ["Linen Shirt"]
        assert self._names(client, catalog, categoryId="other") == []

    def test_product_embeds_relations(self, client, catalog):
        body = client.get(f"/api/{catalog.store.id}/products/{catalog.product.id}").json()
        assert body["price"] == "25.00"
        assert body["category"]["name"] == "Shirts"
        assert body["size"]["value"] == "L"
        assert body["color"]["value"] == "#ff0000"
        assert body["images"][0]["url"] == "https://img/shirt.png"

    def test_create_with_zero_price(self, client, catalog):
        response = client.post(
            f"/api/{catalog.store.id}/products",
            json={
                "name": "Free Hat",
                "price": "0",
                "categoryId": catalog.category.id,
                "colorId": catalog.color.id,
                "sizeId": catalog.size.id,
                "images": [{"url": "https://img/hat.png"}],
            },
        )
        assert response.status_code == 400


class TestOrders:

    def test_checkout_then_pay(self, client, db, catalog):
        store_id = catalog.store.id
        checkout = client.post(
            f"/api/{store_id}/checkout", json={"productIds": [catalog.product.id]}
        )
        assert checkout.status_code == 200
        order = checkout.json()
        assert order["isPaid"] is False

        paid = client.patch(
            f"/api/{store_id}/orders/{order['id']}",
            json={"phone": "555-0100", "address": "1 Main St"},
        ).json()

        assert paid["isPaid"] is True
        assert paid["address"] == "1 Main St"
        assert client.get(f"/api/{store_id}/products").json() == []

    def test_paid_flag_toggles(self, client, catalog):
        store_id = catalog.store.id
        order_id = client.post(
            f"/api/{store_id}/checkout", json={"productIds": [catalog.product.id]}
        ).json()["id"]
        url = f"/api/{store_id}/orders/{order_id}"

        assert client.patch(url, json={}).json()["isPaid"] is True

        unpaid = client.patch(url, json={"isPaid": False})
        assert unpaid.status_code == 200
        assert unpaid.json()["isPaid"] is False

        assert client.patch(url, json={"isPaid": True}).json()["isPaid"] is True

    def test_paying_twice_is_rejected(self, client, catalog):
        store_id = catalog.store.id
        order_id = client.post(
            f"/api/{store_id}/checkout", json={"productIds": [catalog.product.id]}
        ).json()["id"]
        url = f"/api/{store_id}/orders/{order_id}"
        client.patch(url, json={})
        assert client.patch(url, json={"isPaid": True}).status_code == 400

    def test_checkout_unknown_product(self, client, catalog):
        response = client.post(
            f"/api/{catalog.store.id}/checkout", json={"productIds": ["ghost"]}
        )
        assert response.status_code == 404

    def test_list_orders(self, client, catalog):
        store_id = catalog.store.id
        client.post(f"/api/{store_id}/checkout", json={"productIds": [catalog.product.id]})
        [order] = client.get(f"/api/{store_id}/orders").json()
        assert order["items"][0]["productId"] == catalog.product.id


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
