"""StateStore-backed implementation of CartRepository."""

from __future__ import annotations

from typing import Any

from techstore.domain.model.cart import Cart
from techstore.domain.repository.cart_repository import CartRepository
from techstore.domain.repository.state_store import StateStore
from techstore.infrastructure.persistence.records import (
    line_from_raw,
    line_to_raw,
    load_or_default,
)

CART_KEY = "ts_cart"


class StateCartRepository(CartRepository):

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def get(self) -> Cart:
        return load_or_default(self._store, CART_KEY, self._to_domain, Cart)

    def save(self, cart: Cart) -> None:
        self._store.save(CART_KEY, [line_to_raw(line) for line in cart.lines])

    @staticmethod
    def _to_domain(raw: list[dict[str, Any]]) -> Cart:
        return Cart(lines=[line_from_raw(item) for item in raw])
