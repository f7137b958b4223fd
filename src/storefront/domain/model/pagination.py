"""Paging and sorting of catalog listings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from storefront.domain.exceptions import InvalidValueError

T = TypeVar("T")

SORTABLE_FIELDS = ("id", "name", "category", "price", "stock")
DEFAULT_PAGE = 0
DEFAULT_SIZE = 10
DEFAULT_SORT = "name,asc"


@dataclass(frozen=True)
class PageRequest:
    """Page *page* (zero-based) of *size* items sorted by *sort_field*."""

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    sort_field: str = "name"
    descending: bool = False

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidValueError("page", self.page, "cannot be negative")
        if self.size <= 0:
            raise InvalidValueError("size", self.size, "must be positive")
        if self.sort_field not in SORTABLE_FIELDS:
            raise InvalidValueError(
                "sort", self.sort_field, f"expected one of {', '.join(SORTABLE_FIELDS)}"
            )

    @staticmethod
    def of(page: int = DEFAULT_PAGE, size: int = DEFAULT_SIZE, sort: str = DEFAULT_SORT) -> PageRequest:
        """Build a request from a ``"field,direction"`` sort expression.

        Anything other than ``desc`` (case-insensitive) sorts ascending.
        """
        parts = [part.strip() for part in sort.split(",")]
        descending = len(parts) > 1 and parts[1].lower() == "desc"
        return PageRequest(page=page, size=size, sort_field=parts[0], descending=descending)


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages - 1


def paginate(items: Sequence, request: PageRequest) -> Page:
    """Sort *items* by the requested attribute and slice out one page.

    Ties keep their ID order so paging is stable between calls.
    """
    ordered = sorted(items, key=lambda item: item.id or 0)
    ordered = sorted(ordered, key=lambda item: _sort_key(item, request.sort_field),
                     reverse=request.descending)
    start = request.page * request.size
    return Page(
        items=list(ordered[start:start + request.size]),
        page=request.page,
        size=request.size,
        total_elements=len(ordered),
    )


def _sort_key(item, sort_field: str):
    value = getattr(item, sort_field)
    if sort_field == "price":
        return value.amount
    if isinstance(value, str):
        return value.lower()
    return value if value is not None else 0
