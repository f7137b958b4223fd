"""Application service: Checkout use case.

Turns a cart into a confirmed order.  The whole checkout runs in one
unit of work: stock is taken line by line in cart order, and the first
line that fails (unknown product, not enough stock) aborts everything.
Stock already taken for earlier lines is rolled back and no order is
stored.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartLineSpec, OrderDTO, order_to_dto
from storefront.domain.exceptions import CartEmptyError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.stock_allocation_service import (
    StockAllocationService,
)

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_lines: list[CartLineSpec]) -> OrderDTO:
        """Check out a cart.

        Steps:
        1. Reject an empty cart and any non-positive quantity up front.
        2. For each line, in order: take the stock and freeze the price.
        3. Confirm the order, persist it and commit.
        """
        if not cart_lines:
            raise CartEmptyError()
        quantities = [Quantity(line.quantity) for line in cart_lines]

        logger.info("Starting checkout", line_count=len(cart_lines))

        with self._uow:
            svc = StockAllocationService(self._uow.products)
            order = Order.start()
            for line, quantity in zip(cart_lines, quantities):
                svc.allocate(order, line.product_id, quantity)

            order.confirm()
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Checkout complete", order_id=order.id, total=str(order.total))
        return order_to_dto(order)
