"""Application service: Cancel Order use case.

Puts every line's quantity back into stock and marks the order
CANCELLED, all in one unit of work.  Cancelling twice is refused with
AlreadyCancelledError and leaves stock untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import AlreadyCancelledError, ResourceNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.stock_allocation_service import (
    StockAllocationService,
)

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise ResourceNotFoundError("Order", order_id)

            # Checked before touching stock so a repeat cancel is a no-op.
            if order.status == OrderStatus.CANCELLED:
                raise AlreadyCancelledError(order.id)

            svc = StockAllocationService(self._uow.products)
            svc.restore_for_order(order)

            order.cancel()
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order cancelled", order_id=order_id)
        return order_to_dto(order)
