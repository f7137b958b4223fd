"""Application service: List Orders use case (query).

Orders come back most recent first.  At most one filter applies: a
status, or a creation-date range (``created_after`` alone, or both
bounds for an inclusive range).
"""

from __future__ import annotations

from datetime import datetime, timezone

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import InvalidValueError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        status: str | None = None,
        created_after: datetime | None = None,
        created_before: datetime | None = None,
    ) -> list[OrderDTO]:
        if status is not None and (created_after or created_before):
            raise InvalidValueError("status", status, "cannot combine with a date filter")
        if created_before is not None and created_after is None:
            raise InvalidValueError("created_before", created_before, "requires created_after")

        created_after = _as_utc(created_after)
        created_before = _as_utc(created_before)

        with self._uow:
            orders = self._uow.orders
            if status is not None:
                result = orders.list_by_status(self._parse_status(status))
            elif created_after is not None and created_before is not None:
                result = orders.list_created_between(created_after, created_before)
            elif created_after is not None:
                result = orders.list_created_after(created_after)
            else:
                result = orders.list_all()

        return [order_to_dto(order) for order in result]

    @staticmethod
    def _parse_status(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().upper())
        except ValueError as exc:
            raise InvalidValueError("status", raw) from exc


def _as_utc(moment: datetime | None) -> datetime | None:
    """Naive datetimes are taken to be UTC, the zone orders are stamped in."""
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=timezone.utc)
