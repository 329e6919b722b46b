"""CLI commands for stores."""

from __future__ import annotations

import click

from ecom.application.stores import CreateStoreHandler
from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import json_record_store


@click.command("create")
@click.option("--name", required=True, help="Store name.")
@click.option("--user", "user_id", required=True, help="Owner's user ID.")
def store_create(name: str, user_id: str) -> None:
    """Create a store."""
    handler = CreateStoreHandler(json_record_store())

    try:
        store = handler.handle(name=name, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store '{store.name}' created (id={store.id})")


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only this user's stores.")
def store_list(user_id: str | None) -> None:
    """List stores."""
    where = {"user_id": user_id} if user_id else None
    stores = json_record_store().stores.find_many(where=where, order_by={"created_at": "asc"})

    if not stores:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Owner':<20}")
    click.echo("-" * 80)
    for store in stores:
        click.echo(f"{store.id:<34} {store.name:<24} {store.user_id:<20}")
