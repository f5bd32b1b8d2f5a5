"""Application service: Place Order use case.

The order orchestrator. Validation runs first and only reads the
catalog; stock is committed afterwards by the reservation service under
its version guard, and only then is the order persisted.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from shop.domain.exceptions import ProductNotFoundError
from shop.domain.model.order import Order, OrderLineItem
from shop.domain.model.stock import LineItemRequest
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_reservation_service import StockReservationService
from shop.domain.service.stock_validation_service import StockValidationService

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, customer_name: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Every product id must exist (fails on the first missing one).
        2. Stock must cover every line (one aggregated error otherwise).
        3. Build line items with *current* prices and create the Order.
        4. Commit stock, then persist the order (stock is released
           again if the order cannot be saved).
        """
        log = logger.bind(customer=customer_name, lines=len(item_specs))
        validator = StockValidationService(self._product_repo)

        validator.check_product_exist([spec.product_id for spec in item_specs])
        validator.check_product_stock_count(
            [
                LineItemRequest(
                    product_id=spec.product_id,
                    quantity=spec.quantity,
                    option_id=spec.option_id,
                )
                for spec in item_specs
            ]
        )

        line_items: list[OrderLineItem] = []
        for spec in item_specs:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise ProductNotFoundError(spec.product_id)
            line_items.append(
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=Quantity(spec.quantity),
                    unit_price=product.price,  # <-- price snapshot
                    option_id=spec.option_id,
                )
            )

        order = Order.create(customer_name=customer_name, items=line_items)

        reservation = StockReservationService(self._product_repo)
        reservation.reserve_for_order(order)
        try:
            self._order_repo.save(order)
        except Exception:
            # No order holds the stock, so hand it back before failing.
            reservation.release_for_order(order)
            raise

        log.info(
            "stock.reserved",
            order_id=order.id,
            product_ids=sorted({item.product_id for item in order.items}),
        )
        log.info("order.placed", order_id=order.id, total=str(order.total))
        return to_order_dto(order)
