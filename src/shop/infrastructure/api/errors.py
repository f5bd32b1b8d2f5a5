"""Rendering of domain errors in the GraphQL error shape.

Stock failures carry ``extensions`` so clients can tell the customer
exactly which products are unavailable::

    {"message": "stock count less than order quantity",
     "extensions": {"code": "LACK_OF_STOCK_COUNT",
                    "soldOutProductName": ["Tee", "Cap / option stock shortage"]}}
"""

from __future__ import annotations

from shop.domain.exceptions import DomainException, InsufficientStockError


def to_graphql_error(exc: DomainException) -> dict:
    error: dict = {"message": str(exc)}
    if isinstance(exc, InsufficientStockError):
        error["extensions"] = exc.extensions
    return error


def error_response(exc: DomainException) -> dict:
    return {"errors": [to_graphql_error(exc)]}
