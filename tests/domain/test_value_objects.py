"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import InvalidValueError
from storefront.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "BRL"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage_naming_the_field(self):
        with pytest.raises(InvalidValueError, match="'price'"):
            Money.of("ten", field="price")

    def test_of_rejects_nan(self):
        with pytest.raises(InvalidValueError, match="not a number"):
            Money.of("NaN")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(InvalidValueError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5  # type: ignore[operator]

    def test_currency_mismatch_rejected(self):
        with pytest.raises(InvalidValueError, match="cannot combine"):
            Money(Decimal("10"), "BRL") + Money(Decimal("5"), "EUR")

    def test_cent_precision(self):
        assert Money.of("9.90").has_cent_precision
        assert Money.of("9.9").has_cent_precision
        assert not Money.of("9.999").has_cent_precision
        assert Money.of("1.500").has_cent_precision
        assert Money.of("1e30").has_cent_precision
        assert not Money.of("1e-30").has_cent_precision

    def test_str_formatting(self):
        assert str(Money.of("15")) == "R$ 15.00"
        assert str(Money.of("9.5")) == "R$ 9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidValueError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidValueError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(InvalidValueError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
