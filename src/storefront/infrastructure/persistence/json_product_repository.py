"""JSON-backed implementation of ProductRepository.

Works on the ``products`` section of the store document held by the
unit of work; nothing touches the disk until the unit of work commits.
"""

from __future__ import annotations

import copy
from decimal import Decimal

from storefront.domain.model.pagination import Page, PageRequest, paginate
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict], next_id: int = 1) -> None:
        self._products: dict[int, Product] = {
            raw["id"]: self._to_domain(raw) for raw in records
        }
        # IDs are never handed out twice, even after a delete
        self._next_id = max(next_id, max(self._products, default=0) + 1)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._products.get(product_id)
        return copy.deepcopy(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for _, p in sorted(self._products.items())]

    def list_page(self, request: PageRequest) -> Page[Product]:
        return paginate(self.list_all(), request)

    def search_by_name(
        self, text: str, request: PageRequest | None = None
    ) -> Page[Product] | list[Product]:
        needle = text.lower()
        matches = [p for p in self.list_all() if needle in p.name.lower()]
        if request is None:
            return matches
        return paginate(matches, request)

    def list_with_stock_above(self, threshold: int) -> list[Product]:
        return [p for p in self.list_all() if p.stock > threshold]

    def count(self) -> int:
        return len(self._products)

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
            self._next_id += 1
        self._products[product.id] = copy.deepcopy(product)

    def delete(self, product_id: int) -> None:
        self._products.pop(product_id, None)

    # --- Serialization --------------------------------------------------------

    @property
    def next_id(self) -> int:
        return self._next_id

    def dump(self) -> list[dict]:
        return [self._to_raw(p) for _, p in sorted(self._products.items())]

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "image": product.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
            stock=raw["stock"],
            image=raw.get("image"),
        )
