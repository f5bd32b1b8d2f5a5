"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from shop.application.cancel_order import CancelOrderHandler
from shop.application.confirm_order import ConfirmOrderHandler
from shop.application.dto import OrderDTO, OrderItemSpec
from shop.application.place_order import PlaceOrderHandler
from shop.application.show_order import ShowOrderHandler
from shop.domain.exceptions import DomainException, InsufficientStockError
from shop.infrastructure.api.errors import error_response
from shop.infrastructure.bootstrap import order_repository, product_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2@5:1' (product[@option]:qty) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId[@OptionId]:Quantity'."
            )
        target, qty_str = pair.rsplit(":", 1)
        product_str, _, option_str = target.partition("@")
        try:
            product_id = int(product_str)
            option_id = int(option_str) if option_str else None
            qty = int(qty_str)
        except ValueError as exc:
            raise click.BadParameter(
                f"Invalid item '{pair}'; ids and quantity must be integers."
            ) from exc
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty, option_id=option_id))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Option':>6} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        option = "" if item.option_id is None else f"#{item.option_id}"
        click.echo(
            f"  {item.product_name:<20} {option:>6} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Order Total':<33} {dto.total:>29}")


@click.command("place")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'ProductId[@OptionId]:Qty,...'.")
@click.option(
    "--json-errors",
    is_flag=True,
    default=False,
    help="Print failures as a GraphQL error body instead of plain text.",
)
@click.pass_context
def order_place(ctx: click.Context, customer: str, items: str, json_errors: bool) -> None:
    """Place a new order (checks and reserves stock)."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        if json_errors:
            click.echo(json.dumps(error_response(exc), ensure_ascii=False), err=True)
            ctx.exit(1)
        if isinstance(exc, InsufficientStockError):
            raise click.ClickException(
                f"{exc}: {', '.join(exc.sold_out_product_names)}"
            )
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
def order_confirm(order_id: int) -> None:
    """Confirm a placed order."""
    handler = ConfirmOrderHandler(order_repo=order_repository())

    try:
        result = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} confirmed (ok={result.ok}).")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order and return its stock."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled — stock returned.")
