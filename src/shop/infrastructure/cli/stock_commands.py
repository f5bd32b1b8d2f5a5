"""CLI commands for product and option stock."""

from __future__ import annotations

import click

from shop.application.set_stock import SetStockHandler
from shop.application.show_stock import ShowStockHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import product_repository


@click.command("set")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--option-id", default=None, type=int, help="Option ID; omit for the product.")
@click.option("--quantity", required=True, type=int, help="Stock count.")
def stock_set(product_id: int, option_id: int | None, quantity: int) -> None:
    """Set the stock count of a product or option."""
    handler = SetStockHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, quantity=quantity, option_id=option_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    target = f"product #{product_id}"
    if option_id is not None:
        target += f" option #{option_id}"
    click.echo(f"Stock for {target} set to {quantity}")


@click.command("show")
def stock_show() -> None:
    """Show current stock levels."""
    lines = ShowStockHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Option':<20} {'Stock':>8} {'Status':>12}")
    click.echo("-" * 70)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.product_name:<20} {line.option:<20} "
            f"{line.stock_count:>8} {line.status:>12}"
        )
