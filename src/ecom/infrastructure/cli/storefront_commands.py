"""CLI commands for the shopper-facing storefront."""

from __future__ import annotations

import click
import httpx

from ecom import config
from ecom.storefront.actions import ProductQuery, get_products
from ecom.storefront.footer import render_footer


@click.command("products")
@click.option("--api-url", default=None, help="Store API root (defaults to ECOM_API_URL).")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--color", "color_id", default=None, help="Color ID.")
@click.option("--size", "size_id", default=None, help="Size ID.")
@click.option("--featured", is_flag=True, default=False, help="Featured products only.")
def shop_products(
    api_url: str | None,
    category_id: str | None,
    color_id: str | None,
    size_id: str | None,
    featured: bool,
) -> None:
    """Browse the store's products the way shoppers see them."""
    api_url = api_url or config.API_URL
    if not api_url:
        raise click.ClickException("Set ECOM_API_URL or pass --api-url")

    query = ProductQuery(
        category_id=category_id,
        color_id=color_id,
        size_id=size_id,
        is_featured=True if featured else None,
    )
    try:
        products = get_products(query, api_url=api_url)
    except httpx.HTTPError as exc:
        raise click.ClickException(f"Could not load products: {exc}")

    if not products:
        click.echo("No results found.")
    else:
        click.echo(f"{'Product':<28} {'Price':>10}  {'Category':<16} {'Size':<8} {'Color':<10}")
        click.echo("-" * 78)
        for product in products:
            click.echo(
                f"{product.name:<28} {'$' + product.price:>10}  {product.category.name:<16} "
                f"{product.size.value:<8} {product.color.name:<10}"
            )

    click.echo(render_footer(78))
