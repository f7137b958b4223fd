"""Integration tests for the order query use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CartLineSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import InvalidValueError, ResourceNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _setup() -> FakeUnitOfWork:
    uow = FakeUnitOfWork([
        Product(id=1, name="A", category="", price=Money.of("5.00"), stock=100),
    ])
    checkout = CheckoutHandler(uow)
    for qty in (1, 2, 3):
        checkout.handle([CartLineSpec(1, qty)])
    CancelOrderHandler(uow).handle(2)
    return uow


def _backdate(uow: FakeUnitOfWork, order_id: int, days: int) -> None:
    order = uow.orders.get_by_id(order_id)
    order.created_at = order.created_at - timedelta(days=days)
    uow.orders.save(order)
    uow.commit()


class TestShowOrder:

    def test_returns_lines(self):
        dto = ShowOrderHandler(_setup()).handle(3)
        assert dto.lines[0].quantity == 3
        assert dto.lines[0].product_name == "A"

    def test_missing(self):
        with pytest.raises(ResourceNotFoundError, match="Order"):
            ShowOrderHandler(_setup()).handle(42)


class TestListOrders:

    def test_most_recent_first(self):
        uow = _setup()
        _backdate(uow, 1, 2)
        _backdate(uow, 2, 1)
        assert [o.id for o in ListOrdersHandler(uow).handle()] == [3, 2, 1]

    def test_by_status(self):
        handler = ListOrdersHandler(_setup())
        assert sorted(o.id for o in handler.handle(status="confirmed")) == [1, 3]
        assert [o.id for o in handler.handle(status="CANCELLED")] == [2]
        assert handler.handle(status="PENDING") == []

    def test_unknown_status(self):
        with pytest.raises(InvalidValueError, match="'status'"):
            ListOrdersHandler(_setup()).handle(status="SHIPPED")

    def test_created_after(self):
        uow = _setup()
        _backdate(uow, 1, 10)
        cutoff = datetime.now(timezone.utc) - timedelta(days=5)
        assert sorted(o.id for o in ListOrdersHandler(uow).handle(created_after=cutoff)) == [2, 3]

    def test_created_between_accepts_naive_utc(self):
        uow = _setup()
        _backdate(uow, 1, 10)
        _backdate(uow, 2, 3)
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        result = ListOrdersHandler(uow).handle(
            created_after=now - timedelta(days=5), created_before=now - timedelta(days=1)
        )
        assert [o.id for o in result] == [2]

    def test_before_without_after_rejected(self):
        with pytest.raises(InvalidValueError):
            ListOrdersHandler(_setup()).handle(created_before=datetime.now(timezone.utc))

    def test_status_with_dates_rejected(self):
        with pytest.raises(InvalidValueError):
            ListOrdersHandler(_setup()).handle(
                status="CONFIRMED", created_after=datetime.now(timezone.utc)
            )
