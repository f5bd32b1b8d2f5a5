"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shop.domain.exceptions import ConcurrentModificationError
from shop.domain.model.product import OptionsType, Product, ProductOption, StatusOfStock
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        raw = self._load_raw().get(product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw().values():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw().values()]

    def next_id(self) -> int:
        records = self._load_raw()
        return max(records) + 1 if records else 1

    def save(self, product: Product) -> None:
        self.save_all([product])

    def save_all(self, products: list[Product]) -> None:
        records = self._load_raw()
        for product in products:
            stored = records.get(product.id)
            stored_version = stored["version"] if stored is not None else 0
            if stored_version != product.version:
                raise ConcurrentModificationError(
                    f"Product #{product.id} was modified concurrently "
                    f"(expected version {product.version}, found {stored_version})"
                )
        for product in products:
            product.version += 1
            records[product.id] = self._to_raw(product)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_count": product.stock_count,
            "options_type": product.options_type.value,
            "options": [
                {
                    "option_id": option.option_id,
                    "option_name1": option.option_name1,
                    "option_value1": option.option_value1,
                    "stock_count": option.stock_count,
                    "status_of_stock": (
                        option.status_of_stock.value
                        if option.status_of_stock is not None
                        else None
                    ),
                }
                for option in product.options
            ],
            "version": product.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "KRW")),
            stock_count=raw["stock_count"],
            options_type=OptionsType(raw.get("options_type", OptionsType.NONE.value)),
            options=[
                ProductOption(
                    option_id=opt["option_id"],
                    option_name1=opt["option_name1"],
                    option_value1=opt["option_value1"],
                    stock_count=opt["stock_count"],
                    status_of_stock=(
                        StatusOfStock(opt["status_of_stock"])
                        if opt.get("status_of_stock") is not None
                        else None
                    ),
                )
                for opt in raw.get("options", [])
            ],
            version=raw.get("version", 0),
        )

    # --- File I/O -------------------------------------------------------------

    def _load_raw(self) -> dict[int, dict]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: item for item in raw}

    def _persist_raw(self, records: dict[int, dict]) -> None:
        self._file_path.write_text(
            json.dumps(list(records.values()), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
