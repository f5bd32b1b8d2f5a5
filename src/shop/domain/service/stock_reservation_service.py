"""Domain service: Stock Reservation.

Commits the stock an order uses once validation has passed, and gives
it back when the order is cancelled.

Both operations load every touched product, apply all changes in
memory, then write them with a single ``save_all``. The repository
checks each product's version first, so a product changed by another
order in the meantime aborts the whole write.
"""

from __future__ import annotations

import structlog

from shop.domain.exceptions import InsufficientStockError, ProductNotFoundError
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.stock import StockShortage
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve_for_order(self, order: Order) -> None:
        """Deduct product and option stock for every line of *order*.

        Every line is attempted before anything is written. If any line
        cannot be covered, one InsufficientStockError lists all short
        products (plain names first, then option shortages) and the
        store is left untouched.
        """
        products = self._load(order)

        short: dict[int, str] = {}
        option_short: dict[int, str] = {}
        for line in order.items:
            product = products[line.product_id]
            qty = line.quantity.value
            try:
                product.deduct_stock(qty, line.option_id)
            except InsufficientStockError:
                # deduct_stock leaves the product unchanged on failure
                if product.stock_count < qty:
                    short.setdefault(product.id, product.name)
                else:
                    option_short.setdefault(product.id, product.name)

        if short or option_short:
            shortage = StockShortage(
                product_names=tuple(short.values()),
                option_product_names=tuple(
                    name for pid, name in option_short.items() if pid not in short
                ),
            )
            names = shortage.sold_out_product_names
            logger.info("stock.reserve_failed", sold_out_product_names=names)
            raise InsufficientStockError(names)

        self._product_repo.save_all(list(products.values()))

    def release_for_order(self, order: Order) -> None:
        """Return the stock taken by ``reserve_for_order``."""
        products = self._load(order)
        for line in order.items:
            products[line.product_id].restock(line.quantity.value, line.option_id)
        self._product_repo.save_all(list(products.values()))
        logger.info("stock.released", order_id=order.id, product_ids=sorted(products))

    def _load(self, order: Order) -> dict[int, Product]:
        products: dict[int, Product] = {}
        for line in order.items:
            if line.product_id in products:
                continue
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductNotFoundError(line.product_id)
            products[line.product_id] = product
        return products
