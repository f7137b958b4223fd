"""Abstract one-way password hashing."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded, salted hash of *password*."""

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """True if *password* matches a hash produced by ``hash``."""
