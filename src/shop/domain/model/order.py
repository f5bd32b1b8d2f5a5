"""Order aggregate.

The Order owns its line items. Stock is reserved before an order is
persisted, so a PLACED order always holds its stock until cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, Quantity

MAX_LINE_ITEMS = 50


class OrderStatus(Enum):
    PLACED = "PLACED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderLineItem:
    """A product (and optionally one of its options) with a price snapshot."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-placement time
    option_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders; ``__init__`` stays plain so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer_name: str, items: list[OrderLineItem]) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        return Order(id=None, customer_name=customer_name.strip(), items=list(items))

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PLACED -> CONFIRMED."""
        if self.status != OrderStatus.PLACED:
            raise ValidationError(
                f"Cannot confirm order — current status is {self.status.value}, "
                f"expected PLACED"
            )
        self.status = OrderStatus.CONFIRMED

    def cancel(self) -> None:
        """Transition PLACED|CONFIRMED -> CANCELLED.

        Stock must be released by the caller before this is called.
        """
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def holds_stock(self) -> bool:
        return self.status in (OrderStatus.PLACED, OrderStatus.CONFIRMED)
