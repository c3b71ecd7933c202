"""Application service: the shopper's wishlist.

Same persistence contract as the cart: every change is saved before the
call returns, and storage failures are reported, not raised.
"""

from __future__ import annotations

import logging
import threading

from shopease.application.dto import CartOutcome, WishlistItemDTO, WishlistResult
from shopease.application.snapshot import dump_wishlist, load_wishlist
from shopease.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.model.wishlist import Wishlist
from shopease.domain.repository.cart_storage import CartStorage

logger = logging.getLogger(__name__)

DEFAULT_WISHLIST_KEY = "wishlist"


class WishlistService:

    def __init__(self, storage: CartStorage, key: str = DEFAULT_WISHLIST_KEY) -> None:
        self._storage = storage
        self._key = key
        self._wishlist = Wishlist()
        self._lock = threading.Lock()

    def restore(self) -> WishlistResult:
        with self._lock:
            try:
                text = self._storage.load(self._key)
                wishlist, dropped = (
                    load_wishlist(text) if text is not None else (Wishlist(), 0)
                )
            except (PersistenceError, ValidationError) as exc:
                logger.warning("Discarding wishlist '%s': %s", self._key, exc)
                self._wishlist = Wishlist()
                try:
                    self._storage.delete(self._key)
                except PersistenceError as delete_exc:
                    logger.error("Failed to delete wishlist '%s': %s", self._key, delete_exc)
                return self._result(CartOutcome.OK)

            if dropped:
                logger.info("Removed %d invalid wishlist item(s) from '%s'", dropped, self._key)
            self._wishlist = wishlist
            return self._result(CartOutcome.OK)

    def view(self) -> WishlistResult:
        with self._lock:
            return self._result(CartOutcome.OK)

    def contains(self, product_id: str) -> bool:
        return product_id in self._wishlist

    def add(self, product: ProductSnapshot) -> WishlistResult:
        """Save *product*; adding an already-saved product changes nothing."""
        with self._lock:
            return self._add(product)

    def remove(self, product_id: str) -> WishlistResult:
        with self._lock:
            return self._remove(product_id)

    def toggle(self, product: ProductSnapshot) -> WishlistResult:
        """Remove *product* if saved, otherwise save it, as one step."""
        with self._lock:
            if isinstance(product, ProductSnapshot) and product.id in self._wishlist:
                return self._remove(product.id)
            return self._add(product)

    def clear(self) -> WishlistResult:
        with self._lock:
            self._wishlist.clear()
            try:
                self._storage.delete(self._key)
            except PersistenceError as exc:
                logger.error("Failed to delete wishlist '%s': %s", self._key, exc)
                return self._result(CartOutcome.PERSISTENCE_FAILED, str(exc))
            return self._result(CartOutcome.OK)

    # --- Internal helpers -----------------------------------------------------

    def _add(self, product: ProductSnapshot) -> WishlistResult:
        if not isinstance(product, ProductSnapshot) or not product.id:
            return self._result(CartOutcome.INVALID_INPUT, "Invalid product")
        if not self._wishlist.add(product):
            return self._result(CartOutcome.OK)
        return self._commit()

    def _remove(self, product_id: str) -> WishlistResult:
        try:
            self._wishlist.remove(product_id)
        except EntityNotFoundError as exc:
            return self._result(CartOutcome.NOT_FOUND, str(exc))
        return self._commit()

    def _commit(self) -> WishlistResult:
        try:
            self._storage.save(self._key, dump_wishlist(self._wishlist))
        except PersistenceError as exc:
            logger.error("Failed to save wishlist '%s': %s", self._key, exc)
            return self._result(CartOutcome.PERSISTENCE_FAILED, str(exc))
        return self._result(CartOutcome.OK)

    def _result(self, outcome: CartOutcome, message: str = "") -> WishlistResult:
        return WishlistResult(
            outcome=outcome,
            items=[
                WishlistItemDTO(
                    product_id=p.id,
                    product_name=p.name,
                    price=str(p.effective_unit_price.rounded()),
                    in_stock=p.in_stock,
                )
                for p in self._wishlist.items
            ],
            message=message,
        )
