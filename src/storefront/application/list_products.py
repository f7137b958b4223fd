"""Application services: catalog listing and name search (queries)."""

from __future__ import annotations

from storefront.application.dto import (
    ProductDTO,
    ProductPageDTO,
    product_page_to_dto,
    product_to_dto,
)
from storefront.domain.model.pagination import DEFAULT_PAGE, DEFAULT_SIZE, PageRequest
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, request: PageRequest | None = None) -> ProductPageDTO:
        """One page of the catalog (default: first 10 by name)."""
        with self._uow:
            page = self._uow.products.list_page(request or PageRequest())
        return product_page_to_dto(page)

    def handle_all(self) -> list[ProductDTO]:
        with self._uow:
            products = self._uow.products.list_all()
        return [product_to_dto(p) for p in products]

    def handle_in_stock(self, threshold: int = 0) -> list[ProductDTO]:
        """Products with more than *threshold* units available."""
        with self._uow:
            products = self._uow.products.list_with_stock_above(threshold)
        return [product_to_dto(p) for p in products]


class SearchProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_SIZE) -> ProductPageDTO:
        """Case-insensitive name search, one page sorted by name."""
        request = PageRequest(page=page, size=size, sort_field="name")
        with self._uow:
            result = self._uow.products.search_by_name(name, request)
        return product_page_to_dto(result)  # type: ignore[arg-type]

    def handle_all(self, name: str) -> list[ProductDTO]:
        with self._uow:
            result = self._uow.products.search_by_name(name)
        return [product_to_dto(p) for p in result]  # type: ignore[union-attr]
