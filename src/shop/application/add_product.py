"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, stock_count: int = 0) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if stock_count < 0:
            raise ValidationError("Stock count cannot be negative")

        if self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            stock_count=stock_count,
        )
        self._product_repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product
