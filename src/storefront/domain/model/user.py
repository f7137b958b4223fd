"""User entity.

Users only matter for logging in; orders are not tied to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import InvalidValueError


class Role(Enum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"

    @staticmethod
    def parse(raw: str) -> Role:
        try:
            return Role(raw.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise InvalidValueError("role", raw, "expected ADMIN or CLIENT") from exc


@dataclass
class User:
    id: int | None
    name: str
    email: str
    password_hash: str
    role: Role = Role.CLIENT
