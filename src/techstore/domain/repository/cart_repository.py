"""Abstract repository for the session Cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from techstore.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self) -> Cart:
        """Return the current cart (empty if nothing is stored)."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart as it is now."""
