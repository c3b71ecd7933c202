"""Unit tests for the cart pricing service."""

from decimal import Decimal

from shopease.domain.model.cart import CartLineItem
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.model.value_objects import Money, Quantity
from shopease.domain.service.pricing import calculate_totals


def _line(price: str, qty: int, discount=None, pid: str = "p1") -> CartLineItem:
    product = ProductSnapshot.create(id=pid, name="Kurta", price=price, discount=discount)
    return CartLineItem(product=product, quantity=Quantity(qty))


class TestPricingExamples:

    def test_discounted_line_above_threshold(self):
        totals = calculate_totals([_line("1200", 2, discount=10)])
        assert totals.subtotal == Money.of("2160.00")
        assert totals.tax == Money.of("216.00")
        assert totals.shipping == Money.of("0")
        assert totals.discount == Money.of("0")
        assert totals.total == Money.of("2376.00")
        assert totals.total_item_count == 2

    def test_single_line_below_threshold_pays_shipping(self):
        totals = calculate_totals([_line("500", 1)])
        assert totals.subtotal == Money.of("500.00")
        assert totals.tax == Money.of("50.00")
        assert totals.shipping == Money.of("200")
        assert totals.total == Money.of("750.00")


class TestShippingThreshold:

    def test_exactly_threshold_ships_free(self):
        assert calculate_totals([_line("1000", 1)]).shipping == Money.of("0")

    def test_just_below_threshold_pays(self):
        assert calculate_totals([_line("999.99", 1)]).shipping == Money.of("200")

    def test_threshold_applies_to_discounted_subtotal(self):
        # 1100 with 10% off is 990, below the threshold
        assert calculate_totals([_line("1100", 1, discount=10)]).shipping == Money.of("200")


class TestRounding:

    def test_each_figure_rounded_to_two_places(self):
        totals = calculate_totals([_line("10.005", 1)])
        assert totals.subtotal.amount == Decimal("10.01")
        assert totals.tax.amount == Decimal("1.00")
        # 10.005 + 1.0005 + 200 = 211.0055, rounded on its own
        assert totals.total.amount == Decimal("211.01")

    def test_total_rounds_from_unrounded_parts(self):
        totals = calculate_totals([_line("0.333", 3)])
        assert totals.subtotal.amount == Decimal("1.00")
        assert totals.tax.amount == Decimal("0.10")
        assert totals.total.amount == Decimal("201.10")


class TestEmptyCart:

    def test_everything_zero(self):
        totals = calculate_totals([])
        assert totals.subtotal == Money.of("0")
        assert totals.shipping == Money.of("0")
        assert totals.total == Money.of("0")
        assert totals.total_item_count == 0

    def test_multiple_lines_sum(self):
        totals = calculate_totals([_line("300", 2, pid="a"), _line("150", 1, pid="b")])
        assert totals.subtotal == Money.of("750")
        assert totals.total_item_count == 3
