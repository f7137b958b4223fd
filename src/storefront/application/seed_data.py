"""Application service: Seed Data use case.

Fills an empty store with the default accounts and a small sample
catalog.  Safe to run repeatedly: existing users are left alone and the
catalog is only seeded while it is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import structlog

from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)

DEFAULT_USERS = (
    ("admin", "admin@storefront.local", "admin123", Role.ADMIN),
    ("client", "client@storefront.local", "client123", Role.CLIENT),
)

SAMPLE_PRODUCTS = (
    ("Moura M60GD - 60Ah EFB", "Automotive (Cars)", "599.90", 25),
    ("Moura MA5-D - 5Ah AGM", "Motorcycles", "189.90", 40),
    ("Moura M150BD - 150Ah Conventional", "Heavy Duty (Trucks/Buses)", "1299.00", 10),
    ("Moura Boat MB105 - 105Ah Dual Purpose", "Marine / Boats", "899.00", 8),
    ("Moura Clean 12MF63 - 63Ah VRLA", "Stationary / Solar / UPS", "459.90", 15),
)


@dataclass(frozen=True)
class SeedResult:
    users_created: list[str]
    products_created: int


class SeedDataHandler:

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher) -> None:
        self._uow = uow
        self._hasher = hasher

    def handle(self) -> SeedResult:
        users_created: list[str] = []
        products_created = 0

        with self._uow:
            for name, email, password, role in DEFAULT_USERS:
                if self._uow.users.get_by_name(name) is not None:
                    continue
                self._uow.users.save(
                    User(
                        id=None,
                        name=name,
                        email=email,
                        password_hash=self._hasher.hash(password),
                        role=role,
                    )
                )
                users_created.append(name)

            existing = self._uow.products.count()
            if existing == 0:
                for name, category, price, stock in SAMPLE_PRODUCTS:
                    self._uow.products.save(
                        Product.create(name, category, Money(Decimal(price)), stock)
                    )
                    products_created += 1
            else:
                logger.info("Catalog already populated, product seed skipped", products=existing)

            self._uow.commit()

        logger.info("Seed complete", users=users_created, products=products_created)
        return SeedResult(users_created=users_created, products_created=products_created)
