"""Domain service: order-time product and stock validation.

Runs before an order is placed. Both checks only read from the catalog
store; committing stock is the job of ``StockReservationService``.

The stock check makes two passes over the line items:

  Pass 1, whole product: an item whose product holds fewer units than
    the item asks for flags that product.
  Pass 2, options: for ``COMBINATION`` products, the matching
    stock-tracked option is drawn down item by item. A product
    whose option runs below zero is flagged, unless pass 1
    already flagged it.

All flagged products are reported together in one error.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from shop.domain.exceptions import InsufficientStockError, ProductNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.stock import LineItemRequest, StockShortage
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockValidationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_product_exist(self, product_ids: Iterable[int]) -> None:
        """Fail on the first id that has no product in the catalog."""
        for product_id in product_ids:
            if self._product_repo.get_by_id(product_id) is None:
                logger.warning("stock.product_missing", product_id=product_id)
                raise ProductNotFoundError(product_id)

    def check_product_stock_count(self, items: Sequence[LineItemRequest]) -> None:
        """Raise InsufficientStockError listing every deficient product."""
        shortage = self.find_shortage(items)
        if shortage is not None:
            names = shortage.sold_out_product_names
            logger.info("stock.shortage", sold_out_product_names=names)
            raise InsufficientStockError(names)

    def find_shortage(self, items: Sequence[LineItemRequest]) -> StockShortage | None:
        """Return the stock shortage for *items*, or None if all fit.

        Items whose product is missing from the catalog are skipped.
        """
        products = self._load_products(items)

        short: dict[int, Product] = {}
        for item in items:
            product = products.get(item.product_id)
            if product is None:
                continue
            if product.stock_count < item.quantity and product.id not in short:
                short[product.id] = product

        # Running remainder per (product, option), seeded from the store.
        remaining: dict[tuple[int, int], int] = {}
        option_short: dict[int, Product] = {}
        for item in items:
            product = products.get(item.product_id)
            if product is None or not product.has_combination_options:
                continue
            option = product.find_tracked_option(item.option_id)
            if option is None:
                continue
            key = (product.id, option.option_id)
            left = remaining.get(key, option.stock_count) - item.quantity
            remaining[key] = left
            if left < 0 and product.id not in short and product.id not in option_short:
                option_short[product.id] = product

        if not short and not option_short:
            return None
        return StockShortage(
            product_names=tuple(p.name for p in short.values()),
            option_product_names=tuple(p.name for p in option_short.values()),
        )

    def _load_products(self, items: Sequence[LineItemRequest]) -> dict[int, Product]:
        products: dict[int, Product] = {}
        for item in items:
            if item.product_id in products:
                continue
            product = self._product_repo.get_by_id(item.product_id)
            if product is not None:
                products[item.product_id] = product
        return products
