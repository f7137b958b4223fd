"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, ProductSpec, product_to_dto
from storefront.domain.exceptions import ResourceNotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, spec: ProductSpec) -> ProductDTO:
        """Replace every writable field of a product.

        This does NOT affect any existing orders: their lines froze
        the price at checkout time.
        """
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ResourceNotFoundError("Product", product_id)

            product.update_details(
                name=spec.name,
                category=spec.category,
                price=Money.of(spec.price, field="price"),
                stock=spec.stock,
                image=spec.image,
            )
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product updated", product_id=product_id)
        return product_to_dto(product)
