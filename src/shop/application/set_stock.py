"""Application service: Set Stock use case."""

from __future__ import annotations

import structlog

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int, option_id: int | None = None) -> None:
        """Set the stock count of a product, or of one of its options."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.set_stock(quantity, option_id)
        self._product_repo.save(product)
        logger.info(
            "stock.set",
            product_id=product_id,
            option_id=option_id,
            quantity=quantity,
        )
