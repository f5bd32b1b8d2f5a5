"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and API layers can catch them uniformly and render them.
"""

from __future__ import annotations

LACK_OF_STOCK_COUNT = "LACK_OF_STOCK_COUNT"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """An order referenced a product id that is not in the catalog.

    The message is fixed; the offending id is kept on ``product_id``.
    """

    def __init__(self, product_id: int) -> None:
        super().__init__("Could not find the product with ID")
        self.product_id = product_id


class InsufficientStockError(DomainException):
    """One or more products cannot cover the requested quantity.

    Raised once per validation call with every deficient product listed
    in ``sold_out_product_names``.
    """

    code = LACK_OF_STOCK_COUNT

    def __init__(self, sold_out_product_names: list[str]) -> None:
        super().__init__("stock count less than order quantity")
        self.sold_out_product_names = list(sold_out_product_names)

    @property
    def extensions(self) -> dict:
        return {
            "code": self.code,
            "soldOutProductName": list(self.sold_out_product_names),
        }


class ConcurrentModificationError(DomainException):
    """A product changed in the store after it was loaded."""
