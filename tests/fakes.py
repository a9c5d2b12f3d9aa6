"""In-memory fakes for testing.

These implement the same abstract interfaces as the state-backed
repositories but keep everything in plain attributes. No file I/O.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from techstore.domain.model.appointment import Appointment, AppointmentDraft
from techstore.domain.model.cart import Cart, CartLine
from techstore.domain.model.catalog import Catalog
from techstore.domain.model.order import Order
from techstore.domain.model.product import Category, Product
from techstore.domain.model.value_objects import Money
from techstore.domain.repository.appointment_repository import (
    AppointmentRepository,
    DraftRepository,
)
from techstore.domain.repository.cart_repository import CartRepository
from techstore.domain.repository.order_repository import OrderRepository
from techstore.domain.repository.state_store import StateStore

FIXED_NOW = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)


def make_product(
    product_id: str = "p1",
    price: str = "10.00",
    name: str | None = None,
    category: Category = Category.COMPONENTS,
    description: str = "",
) -> Product:
    return Product(
        id=product_id,
        name=name or f"Product {product_id}",
        description=description,
        price=Money.of(price),
        category=category,
        rating=Decimal("4.5"),
        stock=10,
    )


def sample_catalog() -> Catalog:
    """A subset of the shipped catalog with the same ids and prices."""
    return Catalog([
        make_product("p1", "6499.90", "Notebook Pro 14", Category.LAPTOPS,
                     "Intel i7, 16GB RAM, 512GB SSD"),
        make_product("p2", "2899.00", "Smartphone X Max", Category.PHONES,
                     "128GB, Câmera 48MP, Bateria 5000mAh"),
        make_product("p4", "499.90", "SSD NVMe 1TB", Category.COMPONENTS,
                     "Leitura 7000MB/s, Escrita 6500MB/s"),
        make_product("p5", "349.00", "Headset Gamer 7.1", Category.COMPONENTS,
                     "Surround, Microfone com Cancelamento de Ruído"),
    ])


class FakeCartRepository(CartRepository):

    def __init__(self, cart: Cart | None = None) -> None:
        self._lines: list[CartLine] = list(cart.lines) if cart else []
        self.saves = 0

    def get(self) -> Cart:
        return Cart(lines=[line.snapshot() for line in self._lines])

    def save(self, cart: Cart) -> None:
        self._lines = [line.snapshot() for line in cart.lines]
        self.saves += 1


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def add(self, order: Order) -> None:
        self._orders.insert(0, order)


class FakeAppointmentRepository(AppointmentRepository):

    def __init__(self) -> None:
        self._appointments: list[Appointment] = []

    def list_all(self) -> list[Appointment]:
        return list(self._appointments)

    def add(self, appointment: Appointment) -> None:
        self._appointments.insert(0, appointment)

    def remove(self, appointment_id: str) -> bool:
        before = len(self._appointments)
        self._appointments = [a for a in self._appointments if a.id != appointment_id]
        return len(self._appointments) != before


class FakeDraftRepository(DraftRepository):

    def __init__(self, draft: AppointmentDraft | None = None) -> None:
        self._draft = draft or AppointmentDraft()

    def get(self) -> AppointmentDraft:
        return self._draft

    def save(self, draft: AppointmentDraft) -> None:
        self._draft = draft


class InMemoryStateStore(StateStore):
    """Keeps serialized strings, like browser local storage does."""

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}

    def load(self, key: str, default: Any) -> Any:
        if key not in self.entries:
            return default
        try:
            return json.loads(self.entries[key])
        except ValueError:
            return default

    def save(self, key: str, value: Any) -> None:
        try:
            self.entries[key] = json.dumps(value)
        except (TypeError, ValueError):
            pass
