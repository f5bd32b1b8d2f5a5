"""Request and result types for order-time stock checks."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.product import OPTION_SHORTAGE_SUFFIX


@dataclass(frozen=True)
class LineItemRequest:
    """One line of a proposed order, before any product is resolved."""

    product_id: int
    quantity: int
    option_id: int | None = None


@dataclass(frozen=True)
class StockShortage:
    """Every product that cannot cover a proposed order.

    ``product_names`` are short at the product level;
    ``option_product_names`` are short only at the option level.
    """

    product_names: tuple[str, ...] = ()
    option_product_names: tuple[str, ...] = ()

    @property
    def sold_out_product_names(self) -> list[str]:
        return list(self.product_names) + [
            name + OPTION_SHORTAGE_SUFFIX for name in self.option_product_names
        ]

    def __bool__(self) -> bool:
        return bool(self.product_names or self.option_product_names)
