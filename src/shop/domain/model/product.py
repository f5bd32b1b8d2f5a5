"""Product aggregate.

Products live independently of orders. A product carries a total stock
count and, when its options type is ``COMBINATION``, a list of option
variants whose stock is tracked separately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shop.domain.exceptions import InsufficientStockError, ValidationError
from shop.domain.model.value_objects import Money

OPTION_SHORTAGE_SUFFIX = " / option stock shortage"


class OptionsType(Enum):
    NONE = "None"
    SINGLE = "Single"
    COMBINATION = "Combination"


class StatusOfStock(Enum):
    ON_SALE = "OnSale"
    SOLD_OUT = "SoldOut"


@dataclass
class ProductOption:
    """One purchasable variant of a product (e.g. Color / Red).

    ``status_of_stock`` of None means the option is not stock-tracked and
    stock checks skip it.
    """

    option_id: int
    option_name1: str
    option_value1: str
    stock_count: int = 0
    status_of_stock: StatusOfStock | None = StatusOfStock.ON_SALE

    @property
    def is_stock_tracked(self) -> bool:
        return self.status_of_stock is not None

    @property
    def label(self) -> str:
        return f"{self.option_name1}: {self.option_value1}"


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. ``version`` is bumped by the repository on
    every successful save and is used to detect concurrent writers.
    """

    id: int
    name: str
    price: Money
    stock_count: int = 0
    options_type: OptionsType = OptionsType.NONE
    options: list[ProductOption] = field(default_factory=list)
    version: int = 0

    @property
    def has_combination_options(self) -> bool:
        return self.options_type == OptionsType.COMBINATION

    def find_option(self, option_id: int | None) -> ProductOption | None:
        """Return the option with *option_id*, or None."""
        if option_id is None:
            return None
        for option in self.options:
            if option.option_id == option_id:
                return option
        return None

    def find_tracked_option(self, option_id: int | None) -> ProductOption | None:
        """Return the matching option only when it is stock-tracked."""
        option = self.find_option(option_id)
        if option is None or not option.is_stock_tracked:
            return None
        return option

    def add_option(self, option: ProductOption) -> None:
        if self.find_option(option.option_id) is not None:
            raise ValidationError(
                f"Option #{option.option_id} already exists on {self.name}"
            )
        if option.stock_count < 0:
            raise ValidationError("Option stock count cannot be negative")
        self.options.append(option)
        self.options_type = OptionsType.COMBINATION

    def set_stock(self, quantity: int, option_id: int | None = None) -> None:
        """Overwrite the stock count of the product or one of its options."""
        if quantity < 0:
            raise ValidationError("Stock count cannot be negative")
        if option_id is None:
            self.stock_count = quantity
            return
        option = self.find_option(option_id)
        if option is None:
            raise ValidationError(f"Option #{option_id} not found on {self.name}")
        option.stock_count = quantity

    def deduct_stock(self, quantity: int, option_id: int | None = None) -> None:
        """Remove *quantity* units from stock for a placed order.

        Deducts the product total and, for ``COMBINATION`` products, the
        matching tracked option. Nothing changes if either would go
        negative.
        """
        if quantity <= 0:
            raise ValidationError("Deduct quantity must be positive")
        option = self.find_tracked_option(option_id) if self.has_combination_options else None

        if self.stock_count < quantity:
            raise InsufficientStockError([self.name])
        if option is not None and option.stock_count < quantity:
            raise InsufficientStockError([self.name + OPTION_SHORTAGE_SUFFIX])

        self.stock_count -= quantity
        if option is not None:
            option.stock_count -= quantity

    def restock(self, quantity: int, option_id: int | None = None) -> None:
        """Put back stock previously deducted by ``deduct_stock``."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.stock_count += quantity
        if self.has_combination_options:
            option = self.find_tracked_option(option_id)
            if option is not None:
                option.stock_count += quantity
