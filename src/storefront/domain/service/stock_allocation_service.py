"""Domain service: Stock Allocation.

Moves stock between the catalog and orders.  Checkout takes stock out
line by line while it builds the order; cancellation puts every line's
quantity back.  Neither method commits anything: callers run them inside
a unit of work so that a failure on any line undoes the earlier ones.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ResourceNotFoundError
from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockAllocationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def allocate(self, order: Order, product_id: int, quantity: Quantity) -> OrderLine:
        """Take *quantity* of a product out of stock and add it to *order*.

        The product is read fresh on every call, so two lines for the
        same product draw down the stock one after the other.
        """
        product = self._get_product(product_id)
        product.remove_stock(quantity.value)
        self._product_repo.save(product)

        line = OrderLine(
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            quantity=quantity,
            unit_price=product.price,  # <-- price frozen here
        )
        order.add_line(line)
        logger.debug(
            "Stock allocated",
            product=product.name,
            quantity=quantity.value,
            subtotal=str(line.subtotal),
            remaining_stock=product.stock,
        )
        return line

    def restore_for_order(self, order: Order) -> None:
        """Put back exactly the quantity recorded on each order line."""
        for line in order.lines:
            product = self._get_product(line.product_id)
            product.add_stock(line.quantity.value)
            self._product_repo.save(product)
            logger.debug(
                "Stock restored",
                product=product.name,
                quantity=line.quantity.value,
                stock=product.stock,
            )

    def _get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product
