"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from pos.application.dto import LineItemDTO, line_to_dto
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: str) -> LineItemDTO:
        """Add one unit of the product with *product_id* to the cart.

        Raises ProductNotFound for an unknown ID and CartCapacityExceeded
        when the cart cannot take another distinct product.  The cart is
        unchanged in both cases.
        """
        product = self._catalog.find_by_id(product_id)
        line = self._cart.add_product(product)
        logger.debug("Cart: %s x%d", product.id, line.quantity.value)
        return line_to_dto(line)
