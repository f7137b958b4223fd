"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices and stock change, products are added and removed from the catalog.
Orders only keep a snapshot (id, name, price) of the products they bought.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import InsufficientStockError, InvalidValueError
from storefront.domain.model.value_objects import Money

# Largest price the catalog stores: ten digits, two of them decimals.
MAX_PRICE = Decimal("99999999.99")


def validate_product_values(name: str, price: Money, stock: int) -> None:
    """Check the writable fields of a product before create/update."""
    if not name or not name.strip():
        raise InvalidValueError("name", name, "product name is required")
    if price.is_zero:
        raise InvalidValueError("price", price.amount, "must be greater than zero")
    if price.amount > MAX_PRICE:
        raise InvalidValueError("price", price.amount, f"cannot exceed {MAX_PRICE}")
    if not price.has_cent_precision:
        raise InvalidValueError("price", price.amount, "at most two decimal places")
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise InvalidValueError("stock", stock, "must be an integer")
    if stock < 0:
        raise InvalidValueError("stock", stock, "cannot be negative")


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock`` is never negative.  Every mutator below checks
    it, so the checkout can rely on ``remove_stock`` to refuse overselling.
    """

    id: int | None
    name: str
    category: str
    price: Money
    stock: int
    image: str | None = None

    @staticmethod
    def create(
        name: str,
        category: str,
        price: Money,
        stock: int,
        image: str | None = None,
    ) -> Product:
        """Create a new catalog entry; the repository assigns the ID."""
        validate_product_values(name, price, stock)
        return Product(
            id=None,
            name=name.strip(),
            category=(category or "").strip(),
            price=price,
            stock=stock,
            image=image,
        )

    def update_details(
        self,
        name: str,
        category: str,
        price: Money,
        stock: int,
        image: str | None,
    ) -> None:
        """Replace every mutable field at once.

        Existing orders are unaffected: their lines froze the price
        at checkout time.
        """
        validate_product_values(name, price, stock)
        self.name = name.strip()
        self.category = (category or "").strip()
        self.price = price
        self.stock = stock
        self.image = image

    def remove_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock for a purchase."""
        if quantity <= 0:
            raise InvalidValueError("quantity", quantity, "must be positive")
        if self.stock < quantity:
            raise InsufficientStockError(self.name, quantity, self.stock)
        self.stock -= quantity

    def add_stock(self, quantity: int) -> None:
        """Put *quantity* units back (e.g. on order cancellation)."""
        if quantity <= 0:
            raise InvalidValueError("quantity", quantity, "must be positive")
        self.stock += quantity
