"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import InvalidValueError


@dataclass(frozen=True)
class Money:
    """Monetary amount, always in the store currency.

    Uses Decimal so prices, subtotals and totals add up exactly.
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidValueError(
                "amount", self.amount, f"must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise InvalidValueError("amount", self.amount, "cannot be negative")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def has_cent_precision(self) -> bool:
        if self.is_zero:
            return True
        _, digits, exponent = self.amount.as_tuple()
        # trailing zeros add no precision: 1.500 is 1.50
        significant = "".join(map(str, digits)).rstrip("0")
        return exponent + (len(digits) - len(significant)) >= -2

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise InvalidValueError(
                "currency", other.currency, f"cannot combine with {self.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal, field: str = "amount") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidValueError(field, amount, "not a number") from exc
        if not value.is_finite():
            raise InvalidValueError(field, amount, "not a number")
        if value < 0:
            raise InvalidValueError(field, amount, "cannot be negative")
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot buy zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidValueError("quantity", self.value, "must be an integer")
        if self.value <= 0:
            raise InvalidValueError("quantity", self.value, "must be positive")

    def __str__(self) -> str:
        return str(self.value)
