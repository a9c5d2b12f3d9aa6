"""Application service: Checkout use case.

Turns the current cart into an Order, puts it at the front of the order
history and empties the cart.  The two saves are independent; there is
no transaction spanning them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from techstore.application.dto import CheckoutResult, Notice
from techstore.application.mappers import order_to_dto
from techstore.domain.exceptions import CheckoutBlockedError
from techstore.domain.model.cart import Cart
from techstore.domain.model.order import Buyer, Order
from techstore.domain.repository.cart_repository import CartRepository
from techstore.domain.repository.order_repository import OrderRepository
from techstore.domain.service.id_generator import IdGenerator

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        next_id: IdGenerator,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._next_id = next_id
        self._clock = clock

    def can_submit(self, buyer: Buyer, cart: Cart | None = None) -> bool:
        """Whether the confirm action should be enabled."""
        if cart is None:
            cart = self._cart_repo.get()
        return buyer.is_complete and not cart.is_empty and not cart.total().is_zero

    def handle(self, buyer: Buyer) -> CheckoutResult:
        """Place the order.

        Callers are expected to check ``can_submit`` first.  If they do not,
        CheckoutBlockedError is raised before anything is touched.
        """
        cart = self._cart_repo.get()
        if not self.can_submit(buyer, cart):
            raise CheckoutBlockedError(
                "Checkout needs items in the cart plus name, email and address"
            )

        order = Order.place(
            order_id=self._next_id(),
            lines=cart.lines,
            buyer=buyer,
            timestamp=self._clock(),
        )
        self._order_repo.add(order)

        cart.clear()
        self._cart_repo.save(cart)

        logger.info("Order %s placed (%s)", order.id, order.total)
        return CheckoutResult(
            order=order_to_dto(order),
            notice=Notice(
                title="Pedido confirmado!",
                description=f"Número do pedido {order.id}",
            ),
        )
