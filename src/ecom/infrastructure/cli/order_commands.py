"""CLI commands for orders."""

from __future__ import annotations

import click

from ecom.application.columns import ORDER_COLUMNS
from ecom.application.listings import ListOrdersHandler
from ecom.application.orders import CheckoutHandler, MarkOrderUnpaidHandler, RecordPaymentHandler
from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import json_record_store
from ecom.infrastructure.cli.common import show_listing, store_option


@click.command("list")
@store_option
@click.option("--search", default=None, help="Filter rows by product names.")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
def order_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's orders, newest first."""
    show_listing(ListOrdersHandler, ORDER_COLUMNS, store_id, "products", search, page)


@click.command("checkout")
@store_option
@click.option("--product", "product_ids", multiple=True, required=True, help="Product ID (repeatable).")
@click.option("--phone", default="", help="Customer phone number.")
@click.option("--address", default="", help="Shipping address.")
def order_checkout(store_id: str, product_ids: tuple[str, ...], phone: str, address: str) -> None:
    """Create an unpaid order for the given products."""
    handler = CheckoutHandler(json_record_store())

    try:
        order = handler.handle(store_id, list(product_ids), phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order.id} created with {len(order.items)} item(s) (unpaid)")


@click.command("paid")
@store_option
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--phone", default=None, help="Customer phone number.")
@click.option("--address", default=None, help="Shipping address.")
def order_paid(store_id: str, order_id: str, phone: str | None, address: str | None) -> None:
    """Record an order's payment and archive the products sold."""
    handler = RecordPaymentHandler(json_record_store())

    try:
        handler.handle(store_id, order_id, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} marked as paid.")


@click.command("unpaid")
@store_option
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_unpaid(store_id: str, order_id: str) -> None:
    """Clear an order's paid flag."""
    handler = MarkOrderUnpaidHandler(json_record_store())

    try:
        handler.handle(store_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} marked as unpaid.")
