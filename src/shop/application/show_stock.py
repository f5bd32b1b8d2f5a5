"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class StockLineDTO:
    product_id: int
    product_name: str
    option: str  # "" for the product row itself
    stock_count: int
    status: str


class ShowStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[StockLineDTO]:
        """One row per product, followed by a row per option."""
        lines: list[StockLineDTO] = []
        for product in self._product_repo.list_all():
            lines.append(
                StockLineDTO(
                    product_id=product.id,
                    product_name=product.name,
                    option="",
                    stock_count=product.stock_count,
                    status=product.options_type.value,
                )
            )
            for option in product.options:
                lines.append(
                    StockLineDTO(
                        product_id=product.id,
                        product_name=product.name,
                        option=f"#{option.option_id} {option.label}",
                        stock_count=option.stock_count,
                        status=(
                            option.status_of_stock.value
                            if option.status_of_stock is not None
                            else "untracked"
                        ),
                    )
                )
        return lines
