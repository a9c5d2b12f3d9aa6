"""StateStore-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from techstore.domain.model.order import Order
from techstore.domain.repository.order_repository import OrderRepository
from techstore.domain.repository.state_store import StateStore
from techstore.infrastructure.persistence.records import (
    load_or_default,
    order_from_raw,
    order_to_raw,
)

ORDERS_KEY = "ts_orders"


class StateOrderRepository(OrderRepository):

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def list_all(self) -> list[Order]:
        return load_or_default(self._store, ORDERS_KEY, self._to_domain, list)

    def add(self, order: Order) -> None:
        orders = [order, *self.list_all()]
        self._store.save(ORDERS_KEY, [order_to_raw(o) for o in orders])

    @staticmethod
    def _to_domain(raw: list[dict[str, Any]]) -> list[Order]:
        return [order_from_raw(item) for item in raw]
