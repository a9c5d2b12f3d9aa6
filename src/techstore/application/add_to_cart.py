"""Application service: Add To Cart use case.

Resolves the product id against the catalog, merges it into the cart and
saves the cart straight away.
"""

from __future__ import annotations

import logging

from techstore.application.dto import CartDTO
from techstore.application.mappers import cart_to_dto
from techstore.domain.model.catalog import Catalog
from techstore.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, catalog: Catalog) -> None:
        self._cart_repo = cart_repo
        self._catalog = catalog

    def handle(self, product_id: str) -> CartDTO:
        """Add one unit and return the cart so the caller can show it."""
        product = self._catalog.get(product_id)

        cart = self._cart_repo.get()
        line = cart.add(product)
        self._cart_repo.save(cart)

        logger.debug("Cart line %s now at qty %s", line.product_id, line.quantity)
        return cart_to_dto(cart)
