"""Unit tests for the StockValidationService domain service."""

import pytest

from shop.domain.exceptions import InsufficientStockError, ProductNotFoundError
from shop.domain.model.product import OptionsType, Product, ProductOption, StatusOfStock
from shop.domain.model.stock import LineItemRequest
from shop.domain.model.value_objects import Money
from shop.domain.service.stock_validation_service import StockValidationService
from tests.fakes import FakeProductRepository


def _plain(pid: int, name: str, stock: int) -> Product:
    return Product(id=pid, name=name, price=Money.of(10000), stock_count=stock)


def _combination(
    pid: int,
    name: str,
    stock: int,
    option_stock: int,
    status: StatusOfStock | None = StatusOfStock.ON_SALE,
) -> Product:
    return Product(
        id=pid,
        name=name,
        price=Money.of(20000),
        stock_count=stock,
        options_type=OptionsType.COMBINATION,
        options=[
            ProductOption(
                option_id=1,
                option_name1="Color",
                option_value1="Red",
                stock_count=option_stock,
                status_of_stock=status,
            )
        ],
    )


def _item(pid: int, qty: int, option_id: int | None = None) -> LineItemRequest:
    return LineItemRequest(product_id=pid, quantity=qty, option_id=option_id)


def _sold_out_names(svc: StockValidationService, items: list[LineItemRequest]) -> list[str]:
    with pytest.raises(InsufficientStockError) as exc_info:
        svc.check_product_stock_count(items)
    return exc_info.value.sold_out_product_names


class TestCheckProductExist:

    def test_all_present_passes(self):
        repo = FakeProductRepository([_plain(1, "Mug", 5), _plain(2, "Tee", 5)])
        StockValidationService(repo).check_product_exist([1, 2])

    def test_missing_product_rejected(self):
        svc = StockValidationService(FakeProductRepository())

        with pytest.raises(ProductNotFoundError) as exc_info:
            svc.check_product_exist([1])

        assert str(exc_info.value) == "Could not find the product with ID"
        assert exc_info.value.product_id == 1

    def test_stops_at_first_missing_product(self):
        repo = FakeProductRepository([_plain(1, "Mug", 5)])
        svc = StockValidationService(repo)

        with pytest.raises(ProductNotFoundError) as exc_info:
            svc.check_product_exist([1, 99, 98])

        assert exc_info.value.product_id == 99
        assert repo.lookups == [1, 99]


class TestWholeProductStock:

    def test_enough_stock_passes(self):
        repo = FakeProductRepository([_plain(1, "Mug", 5)])
        svc = StockValidationService(repo)

        svc.check_product_stock_count([_item(1, 5)])
        assert svc.find_shortage([_item(1, 5)]) is None

    def test_short_product_rejected(self):
        repo = FakeProductRepository([_plain(1, "Mug", 0)])
        svc = StockValidationService(repo)

        with pytest.raises(InsufficientStockError) as exc_info:
            svc.check_product_stock_count([_item(1, 2)])

        exc = exc_info.value
        assert str(exc) == "stock count less than order quantity"
        assert exc.code == "LACK_OF_STOCK_COUNT"
        assert exc.sold_out_product_names == ["Mug"]

    def test_repeated_lines_reported_once(self):
        repo = FakeProductRepository([_plain(1, "Mug", 1)])
        svc = StockValidationService(repo)

        assert _sold_out_names(svc, [_item(1, 2), _item(1, 3)]) == ["Mug"]

    def test_lines_compared_individually_not_summed(self):
        repo = FakeProductRepository([_plain(1, "Mug", 3)])
        svc = StockValidationService(repo)

        svc.check_product_stock_count([_item(1, 2), _item(1, 2)])

    def test_missing_product_skipped(self):
        svc = StockValidationService(FakeProductRepository())
        svc.check_product_stock_count([_item(42, 1)])


class TestOptionStock:

    def test_short_option_rejected_with_suffix(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=4, option_stock=3)])
        svc = StockValidationService(repo)

        names = _sold_out_names(svc, [_item(1, 4, option_id=1)])

        assert names == ["Tee / option stock shortage"]

    def test_enough_option_stock_passes(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=10, option_stock=3)])
        StockValidationService(repo).check_product_stock_count([_item(1, 3, option_id=1)])

    def test_untracked_option_never_short(self):
        repo = FakeProductRepository(
            [_combination(1, "Tee", stock=10, option_stock=0, status=None)]
        )
        StockValidationService(repo).check_product_stock_count([_item(1, 5, option_id=1)])

    def test_sold_out_status_is_still_tracked(self):
        repo = FakeProductRepository(
            [_combination(1, "Tee", stock=10, option_stock=0, status=StatusOfStock.SOLD_OUT)]
        )
        svc = StockValidationService(repo)

        assert _sold_out_names(svc, [_item(1, 1, option_id=1)]) == [
            "Tee / option stock shortage"
        ]

    def test_non_combination_product_skips_options(self):
        product = _combination(1, "Tee", stock=10, option_stock=0)
        product.options_type = OptionsType.SINGLE
        repo = FakeProductRepository([product])

        StockValidationService(repo).check_product_stock_count([_item(1, 5, option_id=1)])

    def test_unknown_option_id_skipped(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=10, option_stock=0)])
        StockValidationService(repo).check_product_stock_count([_item(1, 5, option_id=7)])

    def test_remainder_carries_across_lines_for_same_option(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=10, option_stock=5)])
        svc = StockValidationService(repo)

        names = _sold_out_names(svc, [_item(1, 3, option_id=1), _item(1, 3, option_id=1)])

        assert names == ["Tee / option stock shortage"]

    def test_product_already_short_not_reported_again(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=1, option_stock=0)])
        svc = StockValidationService(repo)

        assert _sold_out_names(svc, [_item(1, 2, option_id=1)]) == ["Tee"]

    def test_check_does_not_touch_stored_option_stock(self):
        repo = FakeProductRepository([_combination(1, "Tee", stock=4, option_stock=3)])
        svc = StockValidationService(repo)

        with pytest.raises(InsufficientStockError):
            svc.check_product_stock_count([_item(1, 4, option_id=1)])

        assert repo.get_by_id(1).options[0].stock_count == 3


class TestAggregatedFailure:

    def test_option_short_alongside_sufficient_plain_product(self):
        repo = FakeProductRepository([
            _combination(1, "Option Tee", stock=4, option_stock=3),
            _plain(2, "Plain Mug", 10),
        ])
        svc = StockValidationService(repo)

        names = _sold_out_names(svc, [_item(1, 4, option_id=1), _item(2, 4, option_id=1)])

        assert names == ["Option Tee / option stock shortage"]

    def test_plain_names_listed_before_option_names(self):
        repo = FakeProductRepository([
            _combination(1, "Option Tee", stock=10, option_stock=1),
            _plain(2, "Plain Mug", 1),
        ])
        svc = StockValidationService(repo)

        names = _sold_out_names(svc, [_item(1, 2, option_id=1), _item(2, 5)])

        assert names == ["Plain Mug", "Option Tee / option stock shortage"]

    def test_find_shortage_returns_structured_result(self):
        repo = FakeProductRepository([
            _combination(1, "Option Tee", stock=10, option_stock=1),
            _plain(2, "Plain Mug", 1),
        ])
        shortage = StockValidationService(repo).find_shortage(
            [_item(2, 5), _item(1, 2, option_id=1)]
        )

        assert shortage.product_names == ("Plain Mug",)
        assert shortage.option_product_names == ("Option Tee",)
        assert bool(shortage)
