"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, ProductSpec, product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, spec: ProductSpec) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=spec.name,
            category=spec.category,
            price=Money.of(spec.price, field="price"),
            stock=spec.stock,
            image=spec.image,
        )
        with self._uow:
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product added", product_id=product.id, name=product.name)
        return product_to_dto(product)
