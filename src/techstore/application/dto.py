"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Notice:
    """Confirmation message shown after a successful action."""

    title: str
    description: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "R$ 499,90"
    category: str
    rating: str
    stock: int
    specs: list[str]


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    count: int
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderDTO:
    id: str
    buyer_name: str
    payment_method: str
    item_count: int
    total: str
    created_at: str


@dataclass(frozen=True)
class CheckoutResult:
    order: OrderDTO
    notice: Notice


@dataclass(frozen=True)
class AppointmentDTO:
    id: str
    equipment: str
    issue: str
    name: str
    email: str
    phone: str
    date: str
    time: str
    details: str


@dataclass(frozen=True)
class ScheduleResult:
    appointment: AppointmentDTO
    notice: Notice
