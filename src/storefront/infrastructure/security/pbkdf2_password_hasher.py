"""PBKDF2-SHA256 implementation of PasswordHasher.

Encoded form: ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>`` so a
stored hash keeps verifying after the iteration count is raised.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

from storefront.domain.service.password_hasher import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):

    def __init__(self, iterations: int) -> None:
        if iterations <= 0:
            raise ValueError("iterations must be positive")
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_BYTES)
        digest = self._derive(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, encoded: str) -> bool:
        try:
            algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        return hmac.compare_digest(self._derive(password, salt, rounds), expected)

    @staticmethod
    def _derive(password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
