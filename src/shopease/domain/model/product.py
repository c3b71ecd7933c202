"""Product snapshot.

Products live in the catalog and have their own lifecycle: prices change,
discounts come and go.  A cart or wishlist never holds a live reference,
only the snapshot captured when the shopper added the product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from shopease.domain.exceptions import ValidationError
from shopease.domain.model.value_objects import Money, Percentage


@dataclass(frozen=True)
class ProductSnapshot:
    """Read-only copy of a catalog product.

    Use ``ProductSnapshot.create()`` for untrusted input; it enforces the
    structural rules (id, name, numeric price).  The ``__init__`` accepts
    already-typed values.
    """

    id: str
    name: str
    price: Money
    discount: Percentage | None = None
    in_stock: bool = True
    images: tuple[str, ...] = field(default_factory=tuple)
    slug: str | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | float | int | Decimal,
        discount: str | float | int | Decimal | None = None,
        in_stock: bool = True,
        images: list[str] | tuple[str, ...] | None = None,
        slug: str | None = None,
    ) -> ProductSnapshot:
        if not isinstance(id, str) or not id.strip():
            raise ValidationError("Product id is required")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name is required")
        if price is None:
            raise ValidationError(f"Product '{id}' has no price")

        return ProductSnapshot(
            id=id,
            name=name,
            price=Money.of(price),
            discount=Percentage.of(discount) if discount is not None else None,
            in_stock=bool(in_stock),
            images=tuple(images or ()),
            slug=slug,
        )

    @property
    def effective_unit_price(self) -> Money:
        """Unit price after the product's own percentage discount."""
        if self.discount is None:
            return self.price
        return Money(
            self.price.amount * (Decimal("1") - self.discount.fraction),
            self.price.currency,
        )
