"""Domain service: cart pricing.

Pure function of the line items.  Subtotal, tax and total are each
rounded to the paisa from the *unrounded* intermediate values, so the
figures match what the storefront has always shown rather than a
single-rounding regime.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopease.domain.model.cart import CartLineItem
from shopease.domain.model.value_objects import Money

TAX_RATE = Decimal("0.10")
FREE_SHIPPING_THRESHOLD = Money(Decimal("1000"))
FLAT_SHIPPING_FEE = Money(Decimal("200"))


@dataclass(frozen=True)
class CartTotals:
    subtotal: Money
    tax: Money
    shipping: Money
    discount: Money
    total: Money
    total_item_count: int

    @staticmethod
    def empty() -> CartTotals:
        zero = Money.zero().rounded()
        return CartTotals(
            subtotal=zero,
            tax=zero,
            shipping=zero,
            discount=zero,
            total=zero,
            total_item_count=0,
        )


def calculate_totals(items: list[CartLineItem]) -> CartTotals:
    """Derive the monetary totals for a set of cart lines.

    An empty cart costs nothing, shipping included.
    """
    if not items:
        return CartTotals.empty()

    subtotal = Money.zero()
    for item in items:
        subtotal = subtotal + item.line_total

    tax = subtotal * TAX_RATE
    shipping = Money.zero() if subtotal >= FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_FEE
    discount = Money.zero()  # reserved for coupon codes
    total = subtotal + tax + shipping - discount

    return CartTotals(
        subtotal=subtotal.rounded(),
        tax=tax.rounded(),
        shipping=shipping.rounded(),
        discount=discount.rounded(),
        total=total.rounded(),
        total_item_count=sum(item.quantity.value for item in items),
    )
