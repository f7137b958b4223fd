"""JSON-backed implementation of OrderRepository.

Each order is stored as one record with its lines embedded, so an order
is always written and read as a whole.
"""

from __future__ import annotations

import copy
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, records: list[dict]) -> None:
        self._orders: dict[int, Order] = {
            raw["id"]: self._to_domain(raw) for raw in records
        }

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._orders.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return self._most_recent_first(self._orders.values())

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return self._most_recent_first(
            o for o in self._orders.values() if o.status == status
        )

    def list_created_after(self, moment: datetime) -> list[Order]:
        return self._most_recent_first(
            o for o in self._orders.values()
            if o.created_at is not None and o.created_at > moment
        )

    def list_created_between(self, start: datetime, end: datetime) -> list[Order]:
        return self._most_recent_first(
            o for o in self._orders.values()
            if o.created_at is not None and start <= o.created_at <= end
        )

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = max(self._orders, default=0) + 1
        self._orders[order.id] = copy.deepcopy(order)

    # --- Serialization --------------------------------------------------------

    def dump(self) -> list[dict]:
        return [self._to_raw(o) for _, o in sorted(self._orders.items())]

    @staticmethod
    def _most_recent_first(orders) -> list[Order]:
        ordered = sorted(
            orders,
            key=lambda o: (o.created_at.timestamp() if o.created_at else 0.0, o.id or 0),
            reverse=True,
        )
        return [copy.deepcopy(o) for o in ordered]

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat() if order.created_at else None,
            "total": str(order.total.amount),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "subtotal": str(line.subtotal.amount),
                    "currency": line.unit_price.currency,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "BRL")),
            )
            for i in raw["lines"]
        ]
        created_at = raw.get("created_at")
        return Order(
            id=raw["id"],
            lines=lines,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
