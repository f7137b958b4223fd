"""Abstract repository for User entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> User | None:
        """Return a user by login name, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by e-mail (case-insensitive), or None."""

    @abstractmethod
    def count(self) -> int:
        """Number of registered users."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user; assigns an ID to new ones."""
