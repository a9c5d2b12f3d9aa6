"""Order: a frozen snapshot of the cart taken at checkout.

Orders are never mutated or deleted once created.  The total is
recomputed from the items when an Order is built and must match.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from techstore.domain.exceptions import ValidationError
from techstore.domain.model.cart import CartLine
from techstore.domain.model.product import Product
from techstore.domain.model.value_objects import Money, Quantity


class PaymentMethod(Enum):
    CARD = "card"
    INSTANT_TRANSFER = "instant-transfer"
    BANK_SLIP = "bank-slip"


@dataclass(frozen=True)
class Buyer:
    """Checkout form contents."""

    name: str = ""
    email: str = ""
    address: str = ""
    payment_method: PaymentMethod = PaymentMethod.CARD

    @property
    def is_complete(self) -> bool:
        return all(value.strip() for value in (self.name, self.email, self.address))


@dataclass(frozen=True)
class OrderItem:
    """A cart line frozen at checkout; price and quantity never change."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @staticmethod
    def from_line(line: CartLine) -> OrderItem:
        return OrderItem(product=line.product, quantity=line.quantity)


def sum_lines(items: Iterable[OrderItem]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result


@dataclass(frozen=True)
class Order:
    """Use ``Order.place()`` for new orders; the constructor is for
    reconstituting stored ones."""

    id: str
    items: tuple[OrderItem, ...]
    total: Money
    timestamp: datetime
    buyer: Buyer

    def __post_init__(self) -> None:
        expected = sum_lines(self.items)
        if expected != self.total:
            raise ValidationError(
                f"Order {self.id} total {self.total} does not match items ({expected})"
            )

    @staticmethod
    def place(
        order_id: str,
        lines: list[CartLine],
        buyer: Buyer,
        timestamp: datetime,
    ) -> Order:
        items = tuple(OrderItem.from_line(line) for line in lines)
        return Order(
            id=order_id,
            items=items,
            total=sum_lines(items),
            timestamp=timestamp,
            buyer=buyer,
        )

    @property
    def item_count(self) -> int:
        """Number of distinct lines, as shown in the order history."""
        return len(self.items)
