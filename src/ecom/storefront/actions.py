"""Storefront data fetching.

Thin helpers over the store API: build the URL, GET it without caching,
parse the JSON into storefront types. Nothing here catches errors; a
transport failure or a non-2xx status reaches the caller as an
``httpx.HTTPError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from ecom import config
from ecom.storefront.types import Billboard, Category, Color, Product, Size

T = TypeVar("T")

NO_STORE = {"Cache-Control": "no-store"}


@dataclass(frozen=True)
class ProductQuery:
    category_id: str | None = None
    color_id: str | None = None
    size_id: str | None = None
    is_featured: bool | None = None

    def params(self) -> dict[str, Any]:
        return {
            "colorId": self.color_id,
            "sizeId": self.size_id,
            "isFeatured": self.is_featured,
            "categoryId": self.category_id,
        }


def stringify_url(url: str, query: Mapping[str, Any]) -> str:
    """Merge *query* into *url*'s query string.

    Unset values are dropped, *query* wins over parameters already on the
    URL, keys are sorted and booleans render as ``true``/``false``.
    """
    base = httpx.URL(url)
    merged: dict[str, Any] = dict(base.params)
    merged.update((key, value) for key, value in query.items() if value is not None)
    if not merged:
        return url
    return str(base.copy_with(params=sorted(merged.items())))


def _get_json(url: str, client: httpx.Client | None) -> Any:
    if client is None:
        with httpx.Client(timeout=config.HTTP_TIMEOUT_SECONDS) as owned:
            return _get_json(url, owned)
    response = client.get(url, headers=NO_STORE)
    response.raise_for_status()
    return response.json()


def _fetch(url: str, shape: type[T], client: httpx.Client | None) -> T:
    return TypeAdapter(shape).validate_python(_get_json(url, client))


def _api_url(api_url: str | None) -> str:
    return (api_url or config.API_URL).rstrip("/")


def get_products(
    query: ProductQuery | None = None,
    *,
    client: httpx.Client | None = None,
    api_url: str | None = None,
) -> list[Product]:
    url = stringify_url(f"{_api_url(api_url)}/products", (query or ProductQuery()).params())
    return _fetch(url, list[Product], client)


def get_product(
    product_id: str,
    *,
    client: httpx.Client | None = None,
    api_url: str | None = None,
) -> Product:
    return _fetch(f"{_api_url(api_url)}/products/{product_id}", Product, client)


def get_categories(
    *, client: httpx.Client | None = None, api_url: str | None = None
) -> list[Category]:
    return _fetch(f"{_api_url(api_url)}/categories", list[Category], client)


def get_category(
    category_id: str,
    *,
    client: httpx.Client | None = None,
    api_url: str | None = None,
) -> Category:
    return _fetch(f"{_api_url(api_url)}/categories/{category_id}", Category, client)


def get_billboard(
    billboard_id: str,
    *,
    client: httpx.Client | None = None,
    api_url: str | None = None,
) -> Billboard:
    return _fetch(f"{_api_url(api_url)}/billboards/{billboard_id}", Billboard, client)


def get_colors(
    *, client: httpx.Client | None = None, api_url: str | None = None
) -> list[Color]:
    return _fetch(f"{_api_url(api_url)}/colors", list[Color], client)


def get_sizes(
    *, client: httpx.Client | None = None, api_url: str | None = None
) -> list[Size]:
    return _fetch(f"{_api_url(api_url)}/sizes", list[Size], client)
