"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from storefront.infrastructure.security.pbkdf2_password_hasher import (
    Pbkdf2PasswordHasher,
)


def unit_of_work(settings: Settings | None = None) -> JsonUnitOfWork:
    settings = settings or load_settings()
    return JsonUnitOfWork(settings.data_dir)


def password_hasher(settings: Settings | None = None) -> Pbkdf2PasswordHasher:
    settings = settings or load_settings()
    return Pbkdf2PasswordHasher(settings.password_iterations)
