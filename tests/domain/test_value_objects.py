"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from techstore.domain.exceptions import ValidationError
from techstore.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "BRL"

    def test_of_factory_from_string(self):
        assert Money.of("499.90").amount == Decimal("499.90")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_zero_is_allowed(self):
        assert Money.zero().is_zero

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_addition_and_multiplication(self):
        result = Money.of("499.90") * 2 + Money.of("349.00")
        assert result == Money.of("1348.80")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "BRL") + Money(Decimal("5"), "USD")

    def test_amounts_are_not_ordered(self):
        with pytest.raises(TypeError):
            Money.of("1") < Money.of("2")

    def test_str_uses_brazilian_format(self):
        assert str(Money.of("1348.8")) == "R$ 1.348,80"
        assert str(Money.of("349")) == "R$ 349,00"
        assert str(Money.zero()) == "R$ 0,00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_shift_up(self):
        assert Quantity(2).shifted(3) == Quantity(5)

    def test_shift_floors_at_one(self):
        assert Quantity(2).shifted(-10) == Quantity(1)
