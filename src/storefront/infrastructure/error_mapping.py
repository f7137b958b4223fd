"""Translation of errors into boundary responses.

``to_error_response`` is the single place that decides which status and
message the outside world sees for an error.  Unexpected errors get a
generic message; their detail belongs in the operational log only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import (
    AuthenticationError,
    BusinessRuleError,
    DomainException,
    InsufficientStockError,
    InvalidValueError,
    ResourceNotFoundError,
)

GENERIC_ERROR_MESSAGE = "An internal error occurred. Please try again later."


@dataclass(frozen=True)
class ErrorResponse:
    status: int
    error: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_unexpected(self) -> bool:
        return self.status >= 500


# Most specific first: the first matching class wins.
_STATUS_BY_ERROR: tuple[tuple[type[DomainException], int, str], ...] = (
    (ResourceNotFoundError, 404, "Not Found"),
    (InsufficientStockError, 400, "Insufficient Stock"),
    (InvalidValueError, 400, "Invalid Value"),
    (AuthenticationError, 401, "Unauthorized"),
    (BusinessRuleError, 400, "Bad Request"),
    (DomainException, 400, "Bad Request"),
)


def to_error_response(exc: BaseException) -> ErrorResponse:
    for error_type, status, label in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return ErrorResponse(status=status, error=label, message=str(exc))
    return ErrorResponse(
        status=500,
        error="Internal Server Error",
        message=GENERIC_ERROR_MESSAGE,
    )
