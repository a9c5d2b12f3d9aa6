"""Abstract repository for the order history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from techstore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, most recent first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Put a new order at the front of the history."""
