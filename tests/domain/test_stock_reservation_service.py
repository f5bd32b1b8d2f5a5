"""Unit tests for the StockReservationService domain service."""

import pytest

from shop.domain.exceptions import (
    ConcurrentModificationError,
    InsufficientStockError,
    ProductNotFoundError,
)
from shop.domain.model.order import Order, OrderLineItem
from shop.domain.model.product import Product, ProductOption
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.service.stock_reservation_service import StockReservationService
from tests.fakes import FakeProductRepository


def _make_order(items: list[tuple[int, str, int, int | None]]) -> Order:
    """Create an order with (product_id, product_name, qty, option_id) tuples."""
    line_items = [
        OrderLineItem(
            product_id=pid,
            product_name=pname,
            quantity=Quantity(qty),
            unit_price=Money.of(10000),
            option_id=oid,
        )
        for pid, pname, qty, oid in items
    ]
    return Order(id=1, customer_name="Test", items=line_items)


def _repo() -> FakeProductRepository:
    tee = Product(id=1, name="Tee", price=Money.of(20000), stock_count=10)
    tee.add_option(ProductOption(1, "Color", "Red", stock_count=5))
    mug = Product(id=2, name="Mug", price=Money.of(8000), stock_count=3)
    return FakeProductRepository([tee, mug])


class TestReserveForOrder:

    def test_deducts_all_lines(self):
        repo = _repo()
        svc = StockReservationService(repo)

        svc.reserve_for_order(_make_order([(1, "Tee", 2, 1), (2, "Mug", 3, None)]))

        tee = repo.get_by_id(1)
        assert tee.stock_count == 8
        assert tee.options[0].stock_count == 3
        assert repo.get_by_id(2).stock_count == 0

    def test_bumps_versions(self):
        repo = _repo()
        StockReservationService(repo).reserve_for_order(_make_order([(2, "Mug", 1, None)]))
        assert repo.get_by_id(2).version == 1

    def test_nothing_written_when_one_line_fails(self):
        repo = _repo()
        svc = StockReservationService(repo)

        with pytest.raises(InsufficientStockError):
            svc.reserve_for_order(_make_order([(1, "Tee", 2, 1), (2, "Mug", 4, None)]))

        assert repo.get_by_id(1).stock_count == 10
        assert repo.get_by_id(1).options[0].stock_count == 5

    def test_missing_product_rejected(self):
        svc = StockReservationService(_repo())
        with pytest.raises(ProductNotFoundError):
            svc.reserve_for_order(_make_order([(9, "Ghost", 1, None)]))

    def test_stale_version_rejected(self):
        repo = _repo()
        stale = repo.get_by_id(2)

        fresh = repo.get_by_id(2)
        fresh.set_stock(1)
        repo.save(fresh)

        stale.deduct_stock(1)
        with pytest.raises(ConcurrentModificationError):
            repo.save_all([stale])
        assert repo.get_by_id(2).stock_count == 1


class TestReleaseForOrder:

    def test_returns_reserved_stock(self):
        repo = _repo()
        svc = StockReservationService(repo)
        order = _make_order([(1, "Tee", 2, 1), (2, "Mug", 3, None)])

        svc.reserve_for_order(order)
        svc.release_for_order(order)

        tee = repo.get_by_id(1)
        assert tee.stock_count == 10
        assert tee.options[0].stock_count == 5
        assert repo.get_by_id(2).stock_count == 3


class TestReserveForOrderShortage:

    def test_lists_every_short_product(self):
        repo = FakeProductRepository([
            Product(id=1, name="A", price=Money.of(1000), stock_count=3),
            Product(id=2, name="B", price=Money.of(1000), stock_count=3),
        ])
        svc = StockReservationService(repo)

        with pytest.raises(InsufficientStockError) as exc_info:
            svc.reserve_for_order(_make_order([
                (1, "A", 2, None),
                (1, "A", 2, None),
                (2, "B", 2, None),
                (2, "B", 2, None),
            ]))

        assert exc_info.value.sold_out_product_names == ["A", "B"]
        assert repo.get_by_id(1).stock_count == 3
        assert repo.get_by_id(2).stock_count == 3

    def test_option_shortage_listed_after_plain(self):
        repo = _repo()
        svc = StockReservationService(repo)

        with pytest.raises(InsufficientStockError) as exc_info:
            svc.reserve_for_order(_make_order([
                (1, "Tee", 3, 1),
                (1, "Tee", 3, 1),
                (2, "Mug", 2, None),
                (2, "Mug", 2, None),
            ]))

        assert exc_info.value.sold_out_product_names == [
            "Mug",
            "Tee / option stock shortage",
        ]
        assert repo.get_by_id(1).options[0].stock_count == 5
