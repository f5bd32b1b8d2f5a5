"""Application service: Cancel Order use case.

PLACED and CONFIRMED orders hold stock; it is released back to the
catalog before the order is cancelled.
"""

from __future__ import annotations

import structlog

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_reservation_service import StockReservationService

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        if order.holds_stock:
            StockReservationService(self._product_repo).release_for_order(order)

        order.cancel()
        self._order_repo.save(order)
        logger.info("order.cancelled", order_id=order_id)
