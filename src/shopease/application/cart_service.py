"""Application service: the shopper's cart.

Wraps the Cart aggregate with persistence and pricing.  Every mutation
runs under a per-instance lock as validate -> mutate -> recompute ->
persist, so snapshots reach storage in the order mutations were issued.

Nothing here raises for expected conditions.  Bad input, missing lines
and storage failures come back as a ``CartResult`` outcome.
"""

from __future__ import annotations

import logging
import threading

from shopease.application.dto import CartDTO, CartLineDTO, CartOutcome, CartResult
from shopease.application.snapshot import dump_cart, load_cart
from shopease.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from shopease.domain.model.cart import Cart
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.model.value_objects import Money, Quantity
from shopease.domain.repository.cart_storage import CartStorage
from shopease.domain.service.pricing import CartTotals, calculate_totals

logger = logging.getLogger(__name__)

DEFAULT_CART_KEY = "cart"


class CartService:

    def __init__(self, storage: CartStorage, key: str = DEFAULT_CART_KEY) -> None:
        self._storage = storage
        self._key = key
        self._cart = Cart()
        self._totals = CartTotals.empty()
        self._lock = threading.Lock()

    # --- Lifecycle ------------------------------------------------------------

    def restore(self) -> CartResult:
        """Load the last saved cart.

        Always succeeds.  Invalid entries are dropped; an unreadable or
        malformed snapshot yields an empty cart and is removed from
        storage so it cannot come back.
        """
        with self._lock:
            try:
                text = self._storage.load(self._key)
            except PersistenceError as exc:
                logger.warning("Could not read cart '%s': %s", self._key, exc)
                self._reset_corrupt_slot()
                return self._result(CartOutcome.OK)

            if text is None:
                self._cart = Cart()
                self._recompute()
                return self._result(CartOutcome.OK)

            try:
                cart, dropped = load_cart(text)
            except ValidationError as exc:
                logger.warning("Discarding corrupt cart '%s': %s", self._key, exc)
                self._reset_corrupt_slot()
                return self._result(CartOutcome.OK)

            if dropped:
                logger.info("Removed %d invalid cart item(s) from '%s'", dropped, self._key)
            self._cart = cart
            self._recompute()
            return self._result(CartOutcome.OK)

    def view(self) -> CartResult:
        with self._lock:
            return self._result(CartOutcome.OK)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: ProductSnapshot, quantity: int = 1) -> CartResult:
        """Add *quantity* of *product*, merging into an existing line."""
        with self._lock:
            try:
                qty = Quantity(quantity)
                self._check_product(product)
            except ValidationError as exc:
                return self._result(CartOutcome.INVALID_INPUT, str(exc))

            self._cart.add(product, qty)
            return self._commit()

    def remove_item(self, product_id: str) -> CartResult:
        with self._lock:
            try:
                self._cart.remove(product_id)
            except ValidationError as exc:
                return self._result(CartOutcome.INVALID_INPUT, str(exc))
            except EntityNotFoundError as exc:
                return self._result(CartOutcome.NOT_FOUND, str(exc))
            return self._commit()

    def update_quantity(self, product_id: str, quantity: int) -> CartResult:
        """Set a line's quantity.  Zero or less is refused, never a removal."""
        with self._lock:
            try:
                qty = Quantity(quantity)
                self._cart.update_quantity(product_id, qty)
            except ValidationError as exc:
                return self._result(CartOutcome.INVALID_INPUT, str(exc))
            except EntityNotFoundError as exc:
                return self._result(CartOutcome.NOT_FOUND, str(exc))
            return self._commit()

    def clear(self) -> CartResult:
        with self._lock:
            self._cart.clear()
            self._recompute()
            try:
                self._storage.delete(self._key)
            except PersistenceError as exc:
                logger.error("Failed to delete cart '%s': %s", self._key, exc)
                return self._result(CartOutcome.PERSISTENCE_FAILED, str(exc))
            return self._result(CartOutcome.OK)

    # --- Read-only accessors --------------------------------------------------

    @property
    def totals(self) -> CartTotals:
        return self._totals

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self._cart.items]

    def quantity_of(self, product_id: str) -> int:
        for item in self._cart.items:
            if item.product_id == product_id:
                return item.quantity.value
        return 0

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> CartResult:
        self._recompute()
        try:
            self._storage.save(self._key, dump_cart(self._cart))
        except PersistenceError as exc:
            logger.error("Failed to save cart '%s': %s", self._key, exc)
            return self._result(CartOutcome.PERSISTENCE_FAILED, str(exc))
        return self._result(CartOutcome.OK)

    def _recompute(self) -> None:
        self._totals = calculate_totals(self._cart.items)

    def _reset_corrupt_slot(self) -> None:
        self._cart = Cart()
        self._recompute()
        try:
            self._storage.delete(self._key)
        except PersistenceError as exc:
            logger.error("Failed to delete corrupt cart '%s': %s", self._key, exc)

    @staticmethod
    def _check_product(product: ProductSnapshot) -> None:
        if not isinstance(product, ProductSnapshot):
            raise ValidationError("Invalid product")
        if not product.id or not product.name:
            raise ValidationError("Product must have an id and a name")
        if not isinstance(product.price, Money):
            raise ValidationError(f"Product '{product.id}' has no numeric price")

    def _result(self, outcome: CartOutcome, message: str = "") -> CartResult:
        return CartResult(outcome=outcome, cart=self._to_dto(), message=message)

    def _to_dto(self) -> CartDTO:
        t = self._totals
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.product_id,
                    product_name=item.product.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.product.effective_unit_price.rounded()),
                    line_total=str(item.line_total.rounded()),
                )
                for item in self._cart.items
            ],
            subtotal=str(t.subtotal),
            tax=str(t.tax),
            shipping=str(t.shipping),
            discount=str(t.discount),
            total=str(t.total),
            total_item_count=t.total_item_count,
        )
