"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.pagination import Page, PageRequest
from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def list_page(self, request: PageRequest) -> Page[Product]:
        """Return one sorted page of the catalog."""

    @abstractmethod
    def search_by_name(
        self, text: str, request: PageRequest | None = None
    ) -> Page[Product] | list[Product]:
        """Products whose name contains *text*, ignoring case.

        Returns a Page when *request* is given, otherwise a plain list.
        """

    @abstractmethod
    def list_with_stock_above(self, threshold: int) -> list[Product]:
        """Products whose stock is strictly greater than *threshold*."""

    @abstractmethod
    def count(self) -> int:
        """Number of products in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product; assigns an ID to new ones."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog."""
