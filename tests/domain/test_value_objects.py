"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopease.domain.exceptions import ValidationError
from shopease.domain.model.value_objects import Money, Percentage, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "PKR"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(1200.5).amount == Decimal("1200.5")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_rejects_bool(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("NaN"))

    def test_multiplication_by_decimal(self):
        assert Money.of("200") * Decimal("0.10") == Money.of("20")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("5") * True

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "PKR") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "Rs 15.00"
        assert str(Money.of("2376")) == "Rs 2,376.00"


class TestMoneyRounding:

    def test_half_rounds_away_from_zero(self):
        assert Money.of("2.675").rounded().amount == Decimal("2.68")
        assert Money.of("0.005").rounded().amount == Decimal("0.01")

    def test_below_half_rounds_down(self):
        assert Money.of("2.674").rounded().amount == Decimal("2.67")

    def test_rounded_keeps_two_places(self):
        assert str(Money.of("7").rounded().amount) == "7.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -1, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [1.5, "2", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    def test_fraction(self):
        assert Percentage.of(10).fraction == Decimal("0.1")

    @pytest.mark.parametrize("value", [0, 100, "12.5"])
    def test_bounds_inclusive(self, value):
        Percentage.of(value)

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.of(value)
