"""JSON-backed implementation of UserRepository."""

from __future__ import annotations

import copy

from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import UserRepository


class JsonUserRepository(UserRepository):

    def __init__(self, records: list[dict]) -> None:
        self._users: dict[int, User] = {
            raw["id"]: self._to_domain(raw) for raw in records
        }

    # --- UserRepository interface ---------------------------------------------

    def get_by_name(self, name: str) -> User | None:
        for user in self._users.values():
            if user.name == name:
                return copy.deepcopy(user)
        return None

    def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return copy.deepcopy(user)
        return None

    def count(self) -> int:
        return len(self._users)

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = max(self._users, default=0) + 1
        self._users[user.id] = copy.deepcopy(user)

    # --- Serialization --------------------------------------------------------

    def dump(self) -> list[dict]:
        return [self._to_raw(u) for _, u in sorted(self._users.items())]

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            role=Role(raw["role"]),
        )
