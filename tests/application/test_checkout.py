"""Unit tests for checkout and the order paid flag."""

import pytest

from ecom.application.orders import CheckoutHandler, MarkOrderUnpaidHandler, RecordPaymentHandler
from ecom.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import make_record_store, seed_catalog


class TestCheckout:

    def test_creates_unpaid_order(self):
        db = make_record_store()
        catalog = seed_catalog(db)

        order = CheckoutHandler(db).handle(
            catalog.store.id, [catalog.product.id], phone="555-0100", address="1 Main St"
        )

        saved = db.orders.get_by_id(order.id)
        assert not saved.is_paid
        assert saved.product_ids == [catalog.product.id]
        assert saved.phone == "555-0100"

    def test_unknown_product(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(EntityNotFoundError, match="Product 'ghost' not found"):
            CheckoutHandler(db).handle(catalog.store.id, ["ghost"])
        assert db.orders.find_many() == []

    def test_archived_product_rejected(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        catalog.product.archive()
        db.products.save(catalog.product)
        with pytest.raises(ValidationError, match="no longer available"):
            CheckoutHandler(db).handle(catalog.store.id, [catalog.product.id])

    def test_empty_cart_rejected(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        with pytest.raises(ValidationError, match="Product ids are required"):
            CheckoutHandler(db).handle(catalog.store.id, [])


class TestRecordPayment:

    def _setup(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        order = CheckoutHandler(db).handle(catalog.store.id, [catalog.product.id])
        return db, catalog, order

    def test_marks_paid_and_archives_products(self):
        db, catalog, order = self._setup()

        RecordPaymentHandler(db).handle(
            catalog.store.id, order.id, phone="555-0100", address="1 Main St"
        )

        saved = db.orders.get_by_id(order.id)
        assert saved.is_paid
        assert saved.address == "1 Main St"
        assert db.products.get_by_id(catalog.product.id).is_archived

    def test_paying_twice_fails(self):
        db, catalog, order = self._setup()
        RecordPaymentHandler(db).handle(catalog.store.id, order.id)
        with pytest.raises(ValidationError, match="already paid"):
            RecordPaymentHandler(db).handle(catalog.store.id, order.id)

    def test_unknown_order(self):
        db, catalog, _ = self._setup()
        with pytest.raises(EntityNotFoundError, match="Order"):
            RecordPaymentHandler(db).handle(catalog.store.id, "missing")


class TestMarkUnpaid:

    def _paid_order(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        order = CheckoutHandler(db).handle(catalog.store.id, [catalog.product.id])
        RecordPaymentHandler(db).handle(catalog.store.id, order.id)
        return db, catalog, order

    def test_clears_paid_flag(self):
        db, catalog, order = self._paid_order()
        MarkOrderUnpaidHandler(db).handle(catalog.store.id, order.id)
        assert not db.orders.get_by_id(order.id).is_paid

    def test_can_be_paid_again(self):
        db, catalog, order = self._paid_order()
        MarkOrderUnpaidHandler(db).handle(catalog.store.id, order.id)
        RecordPaymentHandler(db).handle(catalog.store.id, order.id)
        assert db.orders.get_by_id(order.id).is_paid

    def test_unpaid_order_is_left_alone(self):
        db = make_record_store()
        catalog = seed_catalog(db)
        order = CheckoutHandler(db).handle(catalog.store.id, [catalog.product.id])
        before = db.orders.get_by_id(order.id).updated_at
        MarkOrderUnpaidHandler(db).handle(catalog.store.id, order.id)
        assert db.orders.get_by_id(order.id).updated_at == before

    def test_unknown_order(self):
        db, catalog, _ = self._paid_order()
        with pytest.raises(EntityNotFoundError, match="Order"):
            MarkOrderUnpaidHandler(db).handle(catalog.store.id, "missing")
