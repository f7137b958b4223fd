"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO, user_to_dto
from storefront.domain.exceptions import InvalidValueError, UserAlreadyExistsError
from storefront.domain.model.user import Role, User
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher) -> None:
        self._uow = uow
        self._hasher = hasher

    def handle(self, name: str, email: str, password: str, role: str = "CLIENT") -> UserDTO:
        for field, value in (("name", name), ("email", email), ("password", password)):
            if not value or not value.strip():
                raise InvalidValueError(field, value, "is required")
        if "@" not in email:
            raise InvalidValueError("email", email, "not an e-mail address")

        user = User(
            id=None,
            name=name.strip(),
            email=email.strip().lower(),
            password_hash=self._hasher.hash(password),
            role=Role.parse(role),
        )

        with self._uow:
            if self._uow.users.get_by_name(user.name) is not None:
                raise UserAlreadyExistsError(f"User '{user.name}' already exists")
            if self._uow.users.get_by_email(user.email) is not None:
                raise UserAlreadyExistsError(f"E-mail '{user.email}' is already registered")
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("User registered", user_id=user.id, role=user.role.value)
        return user_to_dto(user)
