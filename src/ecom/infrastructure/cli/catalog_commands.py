"""CLI commands for billboards, categories, colors and sizes.

Listings read the record store directly; create / update / delete go
through the admin forms and therefore through the admin API.
"""

from __future__ import annotations

import click

from ecom.application.columns import (
    BILLBOARD_COLUMNS,
    CATEGORY_COLUMNS,
    COLOR_COLUMNS,
    SIZE_COLUMNS,
)
from ecom.application.forms import BillboardForm, CategoryForm, ColorForm, SizeForm
from ecom.application.listings import (
    ListBillboardsHandler,
    ListCategoriesHandler,
    ListColorsHandler,
    ListSizesHandler,
)
from ecom.infrastructure.cli.common import (
    delete_with_form,
    show_listing,
    store_option,
    submit_form,
)

search_option = click.option("--search", default=None, help="Filter rows by name.")
page_option = click.option("--page", default=1, type=int, show_default=True, help="Page number.")
yes_option = click.option("--yes", is_flag=True, default=False, help="Skip the confirmation.")


# --- Billboards -----------------------------------------------------------------


@click.command("list")
@store_option
@click.option("--search", default=None, help="Filter rows by label.")
@page_option
def billboard_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's billboards, newest first."""
    show_listing(ListBillboardsHandler, BILLBOARD_COLUMNS, store_id, "label", search, page)


@click.command("create")
@store_option
@click.option("--label", required=True, help="Billboard label.")
@click.option("--image-url", required=True, help="Background image URL.")
def billboard_create(store_id: str, label: str, image_url: str) -> None:
    """Create a billboard."""
    submit_form(BillboardForm, store_id, {"label": label, "image_url": image_url})


@click.command("update")
@store_option
@click.option("--id", "billboard_id", required=True, help="Billboard ID.")
@click.option("--label", default=None, help="New label.")
@click.option("--image-url", default=None, help="New background image URL.")
def billboard_update(
    store_id: str, billboard_id: str, label: str | None, image_url: str | None
) -> None:
    """Update a billboard; omitted options keep their current value."""
    submit_form(
        BillboardForm, store_id, {"label": label, "image_url": image_url}, billboard_id
    )


@click.command("delete")
@store_option
@click.option("--id", "billboard_id", required=True, help="Billboard ID.")
@yes_option
def billboard_delete(store_id: str, billboard_id: str, yes: bool) -> None:
    """Delete a billboard no category uses."""
    delete_with_form(BillboardForm, store_id, billboard_id, yes)


# --- Categories -----------------------------------------------------------------


@click.command("list")
@store_option
@search_option
@page_option
def category_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's categories, newest first."""
    show_listing(ListCategoriesHandler, CATEGORY_COLUMNS, store_id, "name", search, page)


@click.command("create")
@store_option
@click.option("--name", required=True, help="Category name.")
@click.option("--billboard", "billboard_id", required=True, help="Billboard ID.")
def category_create(store_id: str, name: str, billboard_id: str) -> None:
    """Create a category."""
    submit_form(CategoryForm, store_id, {"name": name, "billboard_id": billboard_id})


@click.command("update")
@store_option
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--billboard", "billboard_id", default=None, help="New billboard ID.")
def category_update(
    store_id: str, category_id: str, name: str | None, billboard_id: str | None
) -> None:
    """Update a category; omitted options keep their current value."""
    submit_form(
        CategoryForm, store_id, {"name": name, "billboard_id": billboard_id}, category_id
    )


@click.command("delete")
@store_option
@click.option("--id", "category_id", required=True, help="Category ID.")
@yes_option
def category_delete(store_id: str, category_id: str, yes: bool) -> None:
    """Delete a category no product uses."""
    delete_with_form(CategoryForm, store_id, category_id, yes)


# --- Colors ---------------------------------------------------------------------


@click.command("list")
@store_option
@search_option
@page_option
def color_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's colors, newest first."""
    show_listing(ListColorsHandler, COLOR_COLUMNS, store_id, "name", search, page)


@click.command("create")
@store_option
@click.option("--name", required=True, help="Color name.")
@click.option("--value", required=True, help="Hex code, e.g. '#ff0000'.")
def color_create(store_id: str, name: str, value: str) -> None:
    """Create a color."""
    submit_form(ColorForm, store_id, {"name": name, "value": value})


@click.command("update")
@store_option
@click.option("--id", "color_id", required=True, help="Color ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--value", default=None, help="New hex code.")
def color_update(store_id: str, color_id: str, name: str | None, value: str | None) -> None:
    """Update a color; omitted options keep their current value."""
    submit_form(ColorForm, store_id, {"name": name, "value": value}, color_id)


@click.command("delete")
@store_option
@click.option("--id", "color_id", required=True, help="Color ID.")
@yes_option
def color_delete(store_id: str, color_id: str, yes: bool) -> None:
    """Delete a color no product uses."""
    delete_with_form(ColorForm, store_id, color_id, yes)


# --- Sizes ----------------------------------------------------------------------


@click.command("list")
@store_option
@search_option
@page_option
def size_list(store_id: str, search: str | None, page: int) -> None:
    """List a store's sizes, newest first."""
    show_listing(ListSizesHandler, SIZE_COLUMNS, store_id, "name", search, page)


@click.command("create")
@store_option
@click.option("--name", required=True, help="Size name, e.g. 'Large'.")
@click.option("--value", required=True, help="Size value, e.g. 'L'.")
def size_create(store_id: str, name: str, value: str) -> None:
    """Create a size."""
    submit_form(SizeForm, store_id, {"name": name, "value": value})


@click.command("update")
@store_option
@click.option("--id", "size_id", required=True, help="Size ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--value", default=None, help="New value.")
def size_update(store_id: str, size_id: str, name: str | None, value: str | None) -> None:
    """Update a size; omitted options keep their current value."""
    submit_form(SizeForm, store_id, {"name": name, "value": value}, size_id)


@click.command("delete")
@store_option
@click.option("--id", "size_id", required=True, help="Size ID.")
@yes_option
def size_delete(store_id: str, size_id: str, yes: bool) -> None:
    """Delete a size no product uses."""
    delete_with_form(SizeForm, store_id, size_id, yes)
