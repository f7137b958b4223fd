"""Domain-level exceptions.

Every expected business outcome is a subclass of DomainException so the
boundary can map each kind to a stable status code and message.  Anything
that is *not* a DomainException is treated as an unexpected failure.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class BusinessRuleError(DomainException):
    """A business rule or invariant was violated."""


class ResourceNotFoundError(DomainException):
    """A referenced product, order or user does not exist."""

    def __init__(self, kind: str, resource_id: Any) -> None:
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f"{kind} with ID '{resource_id}' not found")


class CartEmptyError(BusinessRuleError):

    def __init__(self) -> None:
        super().__init__("Cart cannot be empty at checkout")


class InsufficientStockError(BusinessRuleError):

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for '{product_name}' "
            f"(requested {requested}, available {available})"
        )


class InvalidValueError(BusinessRuleError):
    """A write carried a value that violates a field constraint."""

    def __init__(self, field: str, value: Any, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        message = f"Invalid value for field '{field}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class AlreadyCancelledError(BusinessRuleError):

    def __init__(self, order_id: int | None) -> None:
        self.order_id = order_id
        super().__init__(f"Order #{order_id} is already cancelled")


class UserAlreadyExistsError(BusinessRuleError):
    pass


class AuthenticationError(DomainException):
    """Login credentials did not match a known user."""
