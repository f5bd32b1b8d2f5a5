"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI/API and application layers without
exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for."""

    product_id: int
    quantity: int
    option_id: int | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    product_name: str
    option_id: int | None
    quantity: int
    unit_price: str  # formatted, e.g. "15,000 KRW"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class ConfirmOrderResultDTO:
    ok: bool
    results: bool


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                option_id=item.option_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
