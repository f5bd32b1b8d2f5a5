"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shop.application.add_product import AddProductHandler
from shop.application.add_product_option import AddProductOptionHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15000).")
@click.option("--stock", "stock_count", default=0, type=int, help="Initial stock count.")
def product_add(name: str, price: str, stock_count: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, price=price, stock_count=stock_count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("add-option")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--option-id", required=True, type=int, help="Option ID (unique per product).")
@click.option("--name", "option_name", required=True, help="Option name, e.g. Color.")
@click.option("--value", "option_value", required=True, help="Option value, e.g. Red.")
@click.option("--stock", "stock_count", default=0, type=int, help="Option stock count.")
@click.option("--untracked", is_flag=True, default=False, help="Do not track option stock.")
def product_add_option(
    product_id: int,
    option_id: int,
    option_name: str,
    option_value: str,
    stock_count: int,
    untracked: bool,
) -> None:
    """Add an option variant to a product."""
    handler = AddProductOptionHandler(product_repo=product_repository())

    try:
        handler.handle(
            product_id=product_id,
            option_id=option_id,
            option_name=option_name,
            option_value=option_value,
            stock_count=stock_count,
            tracked=not untracked,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Option #{option_id} added to product #{product_id}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>14} {'Options':>12}")
    click.echo("-" * 55)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>14} {p.options_type.value:>12}")
