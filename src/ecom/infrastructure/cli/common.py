"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import click
import httpx

from ecom.application.columns import Column
from ecom.application.data_table import DataTable
from ecom.application.forms import EntityForm
from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import admin_client, json_record_store
from ecom.infrastructure.cli.feedback import ClickNavigator, ClickToaster
from ecom.infrastructure.cli.tables import render_table

CONFIRM_DELETE = "Are you sure? This action cannot be undone."


def store_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option("--store", "store_id", required=True, help="Store ID.")(func)


def show_listing(
    handler_cls: type,
    columns: Sequence[Column],
    store_id: str,
    search_key: str | None = None,
    search: str | None = None,
    page: int = 1,
) -> None:
    """Run a listing handler against the record store and print its table."""
    try:
        rows = handler_cls(json_record_store()).handle(store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    table = DataTable(columns, rows, search_key=search_key)
    if search:
        table.set_filter(search)
    table.go_to_page(page - 1)
    render_table(table)


def submit_form(
    form_cls: type[EntityForm],
    store_id: str,
    values: dict[str, Any],
    entity_id: str | None = None,
) -> None:
    """Create (no *entity_id*) or update a record through its admin form."""
    toaster, navigator = ClickToaster(), ClickNavigator()
    with admin_client() as client:
        try:
            if entity_id is None:
                form = form_cls(client, store_id, toaster, navigator)
            else:
                form = form_cls.load(client, store_id, entity_id, toaster, navigator)
                if not form.is_edit:
                    raise click.ClickException(f"{form.noun.capitalize()} '{entity_id}' not found")
        except httpx.HTTPError as exc:
            raise click.ClickException(f"Admin API request failed: {exc}")

        changed = {key: value for key, value in values.items() if value is not None}
        if form.submit(changed):
            if form.saved:
                click.echo(f"{form.noun.capitalize()} id: {form.saved['id']}")
            return

    if form.errors:
        for field, message in form.errors.items():
            click.echo(f"  {field}: {message}", err=True)
        raise click.ClickException(f"{form.title}: invalid values")
    raise click.exceptions.Exit(1)


def delete_with_form(
    form_cls: type[EntityForm],
    store_id: str,
    entity_id: str,
    assume_yes: bool,
) -> None:
    toaster, navigator = ClickToaster(), ClickNavigator()
    with admin_client() as client:
        try:
            form = form_cls.load(client, store_id, entity_id, toaster, navigator)
        except httpx.HTTPError as exc:
            raise click.ClickException(f"Admin API request failed: {exc}")
        if not form.request_delete():
            raise click.ClickException(f"{form.noun.capitalize()} '{entity_id}' not found")

        if not (assume_yes or click.confirm(CONFIRM_DELETE)):
            form.close_modal()
            click.echo("Cancelled.")
            return
        if not form.confirm_delete():
            raise click.exceptions.Exit(1)
