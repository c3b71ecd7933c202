"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class CartOutcome(Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILED = "persistence_failed"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the shopper."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rs 1,080.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    subtotal: str
    tax: str
    shipping: str
    discount: str
    total: str
    total_item_count: int


@dataclass(frozen=True)
class CartResult:
    """Outcome of a cart operation plus the cart as it now stands.

    On PERSISTENCE_FAILED the cart reflects the attempted mutation even
    though it may not survive a restart.
    """

    outcome: CartOutcome
    cart: CartDTO
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == CartOutcome.OK


@dataclass(frozen=True)
class WishlistItemDTO:
    product_id: str
    product_name: str
    price: str
    in_stock: bool


@dataclass(frozen=True)
class WishlistResult:
    outcome: CartOutcome
    items: list[WishlistItemDTO]
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == CartOutcome.OK

    @property
    def count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class OrderStatusUpdateResult:
    success: bool
    order_id: str
    status: str
    payment_status: str
    notification: str | None = None  # None when no email was attempted


@dataclass(frozen=True)
class ProductLineDTO:
    id: str
    name: str
    slug: str | None
    in_stock: bool
    price: str


@dataclass(frozen=True)
class CatalogReport:
    products: list[ProductLineDTO] = field(default_factory=list)
    checked_id: str | None = None
    checked_found: bool | None = None


@dataclass(frozen=True)
class ReviewStatsDTO:
    product_id: str
    average_rating: Decimal  # one decimal place, e.g. Decimal("4.3")
    total_reviews: int
    rating_distribution: dict[int, int]  # stars -> count, always keys 1..5
    verified_reviews: int
