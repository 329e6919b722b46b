import click
import uvicorn

from ecom import config
from ecom.infrastructure.api.app import create_app
from ecom.infrastructure.cli.catalog_commands import (
    billboard_create,
    billboard_delete,
    billboard_list,
    billboard_update,
    category_create,
    category_delete,
    category_list,
    category_update,
    color_create,
    color_delete,
    color_list,
    color_update,
    size_create,
    size_delete,
    size_list,
    size_update,
)
from ecom.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_paid,
    order_unpaid,
)
from ecom.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_update,
)
from ecom.infrastructure.cli.store_commands import store_create, store_list
from ecom.infrastructure.cli.storefront_commands import shop_products


@click.group()
def cli() -> None:
    """ecom: store admin dashboard and storefront"""


@cli.command("serve")
@click.option("--host", default=config.HOST, show_default=True)
@click.option("--port", default=config.PORT, type=int, show_default=True)
def serve(host: str, port: int) -> None:
    """Run the admin API."""
    uvicorn.run(create_app(), host=host, port=port, log_level=config.LOG_LEVEL.lower())


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group()
def billboard() -> None:
    """Manage billboards."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def color() -> None:
    """Manage colors."""


@cli.group()
def size() -> None:
    """Manage sizes."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def shop() -> None:
    """Browse the storefront."""


# Register subcommands
store.add_command(store_create)
store.add_command(store_list)
billboard.add_command(billboard_list)
billboard.add_command(billboard_create)
billboard.add_command(billboard_update)
billboard.add_command(billboard_delete)
category.add_command(category_list)
category.add_command(category_create)
category.add_command(category_update)
category.add_command(category_delete)
color.add_command(color_list)
color.add_command(color_create)
color.add_command(color_update)
color.add_command(color_delete)
size.add_command(size_list)
size.add_command(size_create)
size.add_command(size_update)
size.add_command(size_delete)
product.add_command(product_list)
product.add_command(product_create)
product.add_command(product_update)
product.add_command(product_delete)
order.add_command(order_list)
order.add_command(order_checkout)
order.add_command(order_paid)
order.add_command(order_unpaid)
shop.add_command(shop_products)
