"""Boundary error handling shared by every CLI command."""

from __future__ import annotations

from typing import NoReturn

import click
import structlog

from storefront.infrastructure.error_mapping import to_error_response

logger = structlog.get_logger(__name__)


def fail(exc: Exception) -> NoReturn:
    """Log *exc* and turn it into a ClickException with the mapped message."""
    response = to_error_response(exc)
    if response.is_unexpected:
        logger.error("Unhandled error", error_type=type(exc).__name__, exc_info=exc)
    else:
        logger.warning("Request rejected", status=response.status, detail=response.message)
    raise click.ClickException(
        f"{response.message} ({response.status} {response.error})"
    ) from exc
