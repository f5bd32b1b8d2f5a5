"""Application service: Add Product Option use case.

Adding the first option switches the product to ``COMBINATION`` options,
so its option stock is checked on every order from then on.
"""

from __future__ import annotations

import structlog

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.product import Product, ProductOption, StatusOfStock
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductOptionHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        option_id: int,
        option_name: str,
        option_value: str,
        stock_count: int,
        tracked: bool = True,
    ) -> Product:
        """Attach an option variant to an existing product.

        An untracked option gets no stock status and is never checked.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.add_option(
            ProductOption(
                option_id=option_id,
                option_name1=option_name,
                option_value1=option_value,
                stock_count=stock_count,
                status_of_stock=StatusOfStock.ON_SALE if tracked else None,
            )
        )
        self._product_repo.save(product)
        logger.info("product.option_added", product_id=product_id, option_id=option_id)
        return product
