"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from ecom import config
from ecom.domain.repository.record_store import RecordStore
from ecom.infrastructure.persistence import serializers as s
from ecom.infrastructure.persistence.json_repository import JsonRepository


def json_record_store(data_dir: Path | None = None) -> RecordStore:
    data_dir = data_dir or config.DATA_DIR
    return RecordStore(
        stores=JsonRepository(data_dir / "stores.json", s.store_to_raw, s.store_to_domain),
        billboards=JsonRepository(
            data_dir / "billboards.json", s.billboard_to_raw, s.billboard_to_domain
        ),
        categories=JsonRepository(
            data_dir / "categories.json", s.category_to_raw, s.category_to_domain
        ),
        colors=JsonRepository(data_dir / "colors.json", s.color_to_raw, s.color_to_domain),
        sizes=JsonRepository(data_dir / "sizes.json", s.size_to_raw, s.size_to_domain),
        products=JsonRepository(
            data_dir / "products.json", s.product_to_raw, s.product_to_domain
        ),
        orders=JsonRepository(data_dir / "orders.json", s.order_to_raw, s.order_to_domain),
    )


def admin_client() -> httpx.Client:
    """HTTP client the admin forms submit through."""
    return httpx.Client(base_url=config.ADMIN_URL, timeout=config.HTTP_TIMEOUT_SECONDS)
