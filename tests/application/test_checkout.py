"""Integration tests for the Checkout use case."""

from dataclasses import replace

import pytest

from techstore.application.add_to_cart import AddToCartHandler
from techstore.application.checkout import CheckoutHandler
from techstore.application.show_orders import ShowOrdersHandler
from techstore.domain.exceptions import CheckoutBlockedError
from techstore.domain.model.order import Buyer, PaymentMethod
from techstore.domain.model.value_objects import Money
from techstore.domain.service.id_generator import SequentialIdGenerator
from tests.fakes import (
    FIXED_NOW,
    FakeCartRepository,
    FakeOrderRepository,
    sample_catalog,
)

BUYER = Buyer(
    name="Ana Souza",
    email="ana@example.com",
    address="Rua das Flores, 10",
    payment_method=PaymentMethod.INSTANT_TRANSFER,
)


def _setup(*product_ids: str):
    cart_repo = FakeCartRepository()
    order_repo = FakeOrderRepository()
    add = AddToCartHandler(cart_repo, sample_catalog())
    for product_id in product_ids:
        add.handle(product_id)
    handler = CheckoutHandler(
        cart_repo,
        order_repo,
        next_id=SequentialIdGenerator("ord"),
        clock=lambda: FIXED_NOW,
    )
    return handler, cart_repo, order_repo


class TestCheckoutHappyPath:

    def test_creates_one_order_with_cart_total(self):
        handler, cart_repo, order_repo = _setup("p4", "p4", "p5")
        before = cart_repo.get().total()

        result = handler.handle(BUYER)

        orders = order_repo.list_all()
        assert len(orders) == 1
        assert orders[0].total == before == Money.of("1348.80")
        assert orders[0].buyer == BUYER
        assert result.order.id == "ord-000001"
        assert result.order.total == "R$ 1.348,80"
        assert result.order.created_at == "2026-10-19 14:30 UTC"

    def test_empties_cart(self):
        handler, cart_repo, _ = _setup("p1")
        handler.handle(BUYER)
        assert cart_repo.get().is_empty

    def test_notice_names_order_id(self):
        handler, _, _ = _setup("p1")
        result = handler.handle(BUYER)
        assert result.notice.title == "Pedido confirmado!"
        assert result.notice.description == "Número do pedido ord-000001"

    def test_history_is_most_recent_first(self):
        handler, cart_repo, order_repo = _setup("p1")
        handler.handle(BUYER)
        AddToCartHandler(cart_repo, sample_catalog()).handle("p2")
        handler.handle(BUYER)

        ids = [o.id for o in ShowOrdersHandler(order_repo).handle()]
        assert ids == ["ord-000002", "ord-000001"]


class TestCheckoutBlocked:

    def test_empty_cart(self):
        handler, _, order_repo = _setup()
        assert not handler.can_submit(BUYER)
        with pytest.raises(CheckoutBlockedError):
            handler.handle(BUYER)
        assert order_repo.list_all() == []

    @pytest.mark.parametrize("field", ["name", "email", "address"])
    def test_missing_buyer_field(self, field):
        handler, cart_repo, order_repo = _setup("p4", "p5")
        buyer = replace(BUYER, **{field: ""})
        saves_before = cart_repo.saves

        assert not handler.can_submit(buyer)
        with pytest.raises(CheckoutBlockedError):
            handler.handle(buyer)

        assert order_repo.list_all() == []
        assert cart_repo.saves == saves_before
        assert cart_repo.get().count() == 2
