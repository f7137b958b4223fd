"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.order import Order
from storefront.domain.model.pagination import Page
from storefront.domain.model.product import Product
from storefront.domain.model.user import User


@dataclass(frozen=True)
class CartLineSpec:
    """Input: one line of the cart (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductSpec:
    """Input: writable product fields for create and update."""

    name: str
    category: str
    price: str | Decimal
    stock: int
    image: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    category: str
    price: Decimal
    stock: int
    image: str | None


@dataclass(frozen=True)
class ProductPageDTO:
    items: list[ProductDTO]
    page: int
    size: int
    total_elements: int
    total_pages: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    lines: list[OrderLineDTO]
    total: Decimal
    created_at: str


@dataclass(frozen=True)
class UserDTO:
    id: int
    name: str
    role: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        category=product.category,
        price=product.price.amount,
        stock=product.stock,
        image=product.image,
    )


def product_page_to_dto(page: Page[Product]) -> ProductPageDTO:
    return ProductPageDTO(
        items=[product_to_dto(p) for p in page.items],
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=line.unit_price.amount,
                subtotal=line.subtotal.amount,
            )
            for line in order.lines
        ],
        total=order.total.amount,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC") if order.created_at else "",
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, name=user.name, role=user.role.value)  # type: ignore[arg-type]
