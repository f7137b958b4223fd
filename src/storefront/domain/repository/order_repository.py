"""Abstract repository for Order aggregate.

Orders are stored and loaded whole: an order always comes back with
all of its lines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, most recent first."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return orders in *status*, most recent first."""

    @abstractmethod
    def list_created_after(self, moment: datetime) -> list[Order]:
        """Return orders created strictly after *moment*."""

    @abstractmethod
    def list_created_between(self, start: datetime, end: datetime) -> list[Order]:
        """Return orders created in the inclusive range [start, end]."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order; assigns an ID to new ones."""
