import click

from shop.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_place,
    order_show,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_add_option,
    product_list,
)
from shop.infrastructure.cli.stock_commands import stock_set, stock_show
from shop.infrastructure.config import get_settings
from shop.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Shop — orders, products and stock"""
    configure_logging(get_settings())


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_add_option)
product.add_command(product_list)
stock.add_command(stock_set)
stock.add_command(stock_show)
