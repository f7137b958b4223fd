"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ResourceNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        with self._uow:
            if self._uow.products.get_by_id(product_id) is None:
                raise ResourceNotFoundError("Product", product_id)
            self._uow.products.delete(product_id)
            self._uow.commit()

        logger.info("Product deleted", product_id=product_id)
