"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its lines.  Lines are immutable
value records: there is no way to reach or change a line except through
the order that owns it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    AlreadyCancelledError,
    BusinessRuleError,
    CartEmptyError,
)
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderLine:
    """Captures what was bought and at which price.

    ``unit_price`` is a copy of the product price at checkout and
    ``subtotal`` is computed once here; later price changes on the
    product never reach an existing line.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money
    subtotal: Money = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "subtotal", self.unit_price * self.quantity.value)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.start()`` for a new order.  The ``__init__`` is kept simple
    so the repository can reconstitute persisted orders as they were.
    """

    id: int | None
    lines: list[OrderLine] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None

    @staticmethod
    def start() -> Order:
        """Open an empty PENDING order for a checkout to fill."""
        return Order(id=None)

    # --- Building -------------------------------------------------------------

    def add_line(self, line: OrderLine) -> None:
        if self.status != OrderStatus.PENDING:
            raise BusinessRuleError(
                f"Cannot add lines to order in {self.status.value} status"
            )
        self.lines.append(line)

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED and stamp the creation time.

        Stock must already be taken for every line (the checkout does
        this while building the lines).
        """
        if self.status != OrderStatus.PENDING:
            raise BusinessRuleError(
                f"Cannot confirm order, current status is {self.status.value}, "
                f"expected PENDING"
            )
        if not self.lines:
            raise CartEmptyError()
        self.status = OrderStatus.CONFIRMED
        self.created_at = datetime.now(timezone.utc)

    def cancel(self) -> None:
        """Transition CONFIRMED -> CANCELLED.

        Stock restoration must happen in the same unit of work, before
        the order is saved.
        """
        if self.status == OrderStatus.CANCELLED:
            raise AlreadyCancelledError(self.id)
        if self.status != OrderStatus.CONFIRMED:
            raise BusinessRuleError(
                f"Cannot cancel order in {self.status.value} status"
            )
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result
