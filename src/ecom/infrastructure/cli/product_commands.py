"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ecom.application.columns import PRODUCT_COLUMNS
from ecom.application.forms import ProductForm
from ecom.application.listings import ListProductsHandler
from ecom.infrastructure.cli.common import (
    delete_with_form,
    show_listing,
    store_option,
    submit_form,
)


def _images(urls: tuple[str, ...]) -> list[dict[str, str]] | None:
    return [{"url": url} for url in urls] if urls else None


@click.command("list")
@store_option
@click.option("--search", default=None, help="Filter rows by name.")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
def product_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's products (archived included), newest first."""
    show_listing(ListProductsHandler, PRODUCT_COLUMNS, store_id, "name", search, page)


@click.command("create")
@store_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--color", "color_id", required=True, help="Color ID.")
@click.option("--size", "size_id", required=True, help="Size ID.")
@click.option("--image", "images", multiple=True, required=True, help="Image URL (repeatable).")
@click.option("--featured", is_flag=True, default=False, help="Show on the home page.")
@click.option("--archived", is_flag=True, default=False, help="Hide from the storefront.")
def product_create(
    store_id: str,
    name: str,
    price: str,
    category_id: str,
    color_id: str,
    size_id: str,
    images: tuple[str, ...],
    featured: bool,
    archived: bool,
) -> None:
    """Add a new product to the catalog."""
    submit_form(
        ProductForm,
        store_id,
        {
            "name": name,
            "price": price,
            "category_id": category_id,
            "color_id": color_id,
            "size_id": size_id,
            "images": _images(images),
            "is_featured": featured,
            "is_archived": archived,
        },
    )


@click.command("update")
@store_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", "category_id", default=None, help="New category ID.")
@click.option("--color", "color_id", default=None, help="New color ID.")
@click.option("--size", "size_id", default=None, help="New size ID.")
@click.option("--image", "images", multiple=True, help="Replacement image URLs (repeatable).")
@click.option("--featured/--not-featured", default=None, help="Featured flag.")
@click.option("--archived/--not-archived", default=None, help="Archived flag.")
def product_update(
    store_id: str,
    product_id: str,
    name: str | None,
    price: str | None,
    category_id: str | None,
    color_id: str | None,
    size_id: str | None,
    images: tuple[str, ...],
    featured: bool | None,
    archived: bool | None,
) -> None:
    """Update a product; omitted options keep their current value."""
    submit_form(
        ProductForm,
        store_id,
        {
            "name": name,
            "price": price,
            "category_id": category_id,
            "color_id": color_id,
            "size_id": size_id,
            "images": _images(images),
            "is_featured": featured,
            "is_archived": archived,
        },
        product_id,
    )


@click.command("delete")
@store_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation.")
def product_delete(store_id: str, product_id: str, yes: bool) -> None:
    """Delete a product no order references."""
    delete_with_form(ProductForm, store_id, product_id, yes)
