"""Application services: change quantity, remove a line, empty the cart.

Unknown product ids are ignored rather than reported, matching the
Cart aggregate.
"""

from __future__ import annotations

from techstore.application.dto import CartDTO
from techstore.application.mappers import cart_to_dto
from techstore.domain.repository.cart_repository import CartRepository


class ChangeQuantityHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str, delta: int) -> CartDTO:
        cart = self._cart_repo.get()
        cart.set_qty(product_id, delta)
        self._cart_repo.save(cart)
        return cart_to_dto(cart)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str) -> CartDTO:
        cart = self._cart_repo.get()
        cart.remove(product_id)
        self._cart_repo.save(cart)
        return cart_to_dto(cart)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> None:
        cart = self._cart_repo.get()
        cart.clear()
        self._cart_repo.save(cart)
