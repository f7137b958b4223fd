"""Transaction boundary shared by every write use case.

Usage::

    with uow:
        product = uow.products.get_by_id(1)
        product.remove_stock(2)
        uow.products.save(product)
        uow.commit()

Leaving the ``with`` block always rolls back whatever was not committed,
on the normal path and when an exception escapes.  Nothing saved through
the repositories is visible to other units of work before ``commit()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change saved in this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change saved since the last commit."""
