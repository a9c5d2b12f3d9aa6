"""Raw (JSON-ready) representations of the session aggregates.

``*_to_raw`` produce plain dicts/lists; ``*_from_raw`` rebuild domain
objects and raise on anything malformed.  ``load_or_default`` turns
those failures into the default value, so a stored format that no longer
matches simply reads as "nothing stored".
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar

from techstore.domain.exceptions import DomainException
from techstore.domain.model.appointment import (
    Appointment,
    AppointmentDraft,
    parse_equipment,
)
from techstore.domain.model.cart import CartLine
from techstore.domain.model.order import Buyer, Order, OrderItem, PaymentMethod
from techstore.domain.model.product import Category, Product
from techstore.domain.model.value_objects import Money, Quantity
from techstore.domain.repository.state_store import StateStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Everything a hand-edited or outdated record can raise while being rebuilt.
MALFORMED = (KeyError, TypeError, ValueError, AttributeError, ArithmeticError, DomainException)


def load_or_default(
    store: StateStore,
    key: str,
    convert: Callable[[Any], T],
    default: Callable[[], T],
) -> T:
    raw = store.load(key, None)
    if raw is None:
        return default()
    try:
        return convert(raw)
    except MALFORMED as exc:
        logger.warning("Discarding stored %r: %s", key, exc)
        return default()


# --- Products and cart lines -------------------------------------------------


def product_to_raw(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "category": product.category.value,
        "rating": str(product.rating),
        "stock": product.stock,
        "img": product.image,
        "specs": list(product.specs),
    }


def product_from_raw(raw: dict[str, Any]) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        description=raw.get("description", ""),
        price=Money(Money.of(raw["price"]).amount, raw.get("currency", "BRL")),
        category=Category(raw["category"]),
        rating=Decimal(str(raw.get("rating", "0"))),
        stock=int(raw.get("stock", 0)),
        image=raw.get("img", ""),
        specs=tuple(raw.get("specs", ())),
    )


def line_to_raw(line: CartLine) -> dict[str, Any]:
    return {**product_to_raw(line.product), "qty": line.quantity.value}


def line_from_raw(raw: dict[str, Any]) -> CartLine:
    return CartLine(product=product_from_raw(raw), quantity=Quantity(raw["qty"]))


def item_to_raw(item: OrderItem) -> dict[str, Any]:
    return {**product_to_raw(item.product), "qty": item.quantity.value}


def item_from_raw(raw: dict[str, Any]) -> OrderItem:
    return OrderItem(product=product_from_raw(raw), quantity=Quantity(raw["qty"]))


# --- Orders ------------------------------------------------------------------


def order_to_raw(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "items": [item_to_raw(item) for item in order.items],
        "total": str(order.total.amount),
        "timestamp": order.timestamp.isoformat(),
        "buyer": {
            "name": order.buyer.name,
            "email": order.buyer.email,
            "address": order.buyer.address,
            "payment_method": order.buyer.payment_method.value,
        },
    }


def order_from_raw(raw: dict[str, Any]) -> Order:
    buyer = raw["buyer"]
    return Order(
        id=raw["id"],
        items=tuple(item_from_raw(i) for i in raw["items"]),
        total=Money.of(raw["total"]),
        timestamp=datetime.fromisoformat(raw["timestamp"]),
        buyer=Buyer(
            name=buyer["name"],
            email=buyer["email"],
            address=buyer["address"],
            payment_method=PaymentMethod(buyer["payment_method"]),
        ),
    )


# --- Appointments and the draft form -----------------------------------------


def appointment_to_raw(appointment: Appointment) -> dict[str, Any]:
    return {
        "id": appointment.id,
        "equipment": appointment.equipment.value,
        "issue": appointment.issue,
        "name": appointment.name,
        "email": appointment.email,
        "phone": appointment.phone,
        "date": appointment.date.isoformat(),
        "time": appointment.time,
        "details": appointment.details,
    }


def appointment_from_raw(raw: dict[str, Any]) -> Appointment:
    return Appointment(
        id=raw["id"],
        equipment=parse_equipment(raw["equipment"]),
        issue=raw["issue"],
        name=raw["name"],
        email=raw["email"],
        phone=raw["phone"],
        date=date.fromisoformat(raw["date"]),
        time=raw["time"],
        details=raw.get("details", ""),
    )


def draft_to_raw(draft: AppointmentDraft) -> dict[str, Any]:
    return {
        "equipment": draft.equipment.value,
        "issue": draft.issue,
        "name": draft.name,
        "email": draft.email,
        "phone": draft.phone,
        "date": draft.date,
        "time": draft.time,
        "details": draft.details,
    }


def draft_from_raw(raw: dict[str, Any]) -> AppointmentDraft:
    if not all(isinstance(value, str) for value in raw.values()):
        raise TypeError("draft fields must be strings")
    return AppointmentDraft().with_changes(**raw)
