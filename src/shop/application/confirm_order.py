"""Application service: Confirm Order use case.

Stock was already committed when the order was placed, so confirming
is only a state transition on the Order aggregate.
"""

from __future__ import annotations

import structlog

from shop.application.dto import ConfirmOrderResultDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ConfirmOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> ConfirmOrderResultDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.confirm()
        self._order_repo.save(order)
        logger.info("order.confirmed", order_id=order_id)
        return ConfirmOrderResultDTO(ok=True, results=True)
