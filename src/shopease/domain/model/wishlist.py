"""Wishlist aggregate — products a shopper saved for later."""

from __future__ import annotations

from dataclasses import dataclass, field

from shopease.domain.exceptions import EntityNotFoundError
from shopease.domain.model.product import ProductSnapshot


@dataclass
class Wishlist:
    """Ordered set of product snapshots, unique by product id."""

    items: list[ProductSnapshot] = field(default_factory=list)

    def add(self, product: ProductSnapshot) -> bool:
        """Add the product; returns False when it was already saved."""
        if product.id in self:
            return False
        self.items.append(product)
        return True

    def remove(self, product_id: str) -> None:
        for product in self.items:
            if product.id == product_id:
                self.items.remove(product)
                return
        raise EntityNotFoundError(f"Product '{product_id}' is not in the wishlist")

    def clear(self) -> None:
        self.items.clear()

    @property
    def count(self) -> int:
        return len(self.items)

    def __contains__(self, product_id: object) -> bool:
        return any(product.id == product_id for product in self.items)
