"""Application service: Login use case.

Unknown user and wrong password fail with the same message so the
response does not reveal which user names exist.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO, user_to_dto
from storefront.domain.exceptions import AuthenticationError
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)


class LoginHandler:

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher) -> None:
        self._uow = uow
        self._hasher = hasher

    def handle(self, username: str, password: str) -> UserDTO:
        with self._uow:
            user = self._uow.users.get_by_name(username)

        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.info("Login rejected", username=username)
            raise AuthenticationError("Invalid username or password")

        logger.info("Login succeeded", user_id=user.id, role=user.role.value)
        return user_to_dto(user)
