"""Cart aggregate — a shopper's line items.

The Cart owns its line items and enforces the one-line-per-product rule.
Totals are not stored here; they are derived by the pricing service
after every mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopease.domain.exceptions import EntityNotFoundError, ValidationError
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.model.value_objects import Money, Quantity


@dataclass
class CartLineItem:
    """Pairs a product snapshot with a quantity.

    The snapshot is locked at add-time; only ``quantity`` changes.
    """

    product: ProductSnapshot
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.effective_unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for a shopper's cart.

    Invariants:
    - at most one line item per product id
    - every quantity is >= 1
    """

    items: list[CartLineItem] = field(default_factory=list)

    def add(self, product: ProductSnapshot, quantity: Quantity) -> None:
        """Append a new line, or grow the existing line for this product.

        No upper bound is enforced; stock limits belong to the catalog.
        """
        existing = self._find(product.id)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
            return
        self.items.append(CartLineItem(product=product, quantity=quantity))

    def remove(self, product_id: str) -> None:
        item = self._find(product_id)
        if item is None:
            raise EntityNotFoundError(f"Product '{product_id}' is not in the cart")
        self.items.remove(item)

    def update_quantity(self, product_id: str, quantity: Quantity) -> None:
        item = self._find(product_id)
        if item is None:
            raise EntityNotFoundError(f"Product '{product_id}' is not in the cart")
        item.quantity = quantity

    def clear(self) -> None:
        self.items.clear()

    # --- Computed properties --------------------------------------------------

    @property
    def total_item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __contains__(self, product_id: object) -> bool:
        return any(item.product_id == product_id for item in self.items)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartLineItem | None:
        if not product_id:
            raise ValidationError("Product id is required")
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
