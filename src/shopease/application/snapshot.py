"""Serialized form of carts and wishlists.

The persisted layout is the storefront's own:

    [{"product": {"_id": ..., "name": ..., "price": ..., ...}, "quantity": 2}]

Parsing is deserialize-then-validate.  A payload that is not a JSON list
is rejected as a whole (ValidationError); individual entries that fail
structural checks are dropped and counted.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from shopease.domain.exceptions import ValidationError
from shopease.domain.model.cart import Cart, CartLineItem
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.model.value_objects import Quantity
from shopease.domain.model.wishlist import Wishlist


def product_to_raw(product: ProductSnapshot) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "_id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "inStock": product.in_stock,
        "images": list(product.images),
    }
    if product.discount is not None:
        raw["discount"] = str(product.discount.value)
    if product.slug:
        raw["slug"] = product.slug
    return raw


def product_from_raw(raw: Any) -> ProductSnapshot:
    if not isinstance(raw, dict):
        raise ValidationError("Product entry is not an object")
    price = raw.get("price")
    if not _is_numeric(price):
        raise ValidationError(f"Product price is not numeric: {price!r}")
    discount = raw.get("discount")
    if discount is not None and not _is_numeric(discount):
        raise ValidationError(f"Product discount is not numeric: {discount!r}")
    images = raw.get("images") or []
    if not isinstance(images, list):
        images = []
    slug = raw.get("slug")
    if isinstance(slug, dict):  # catalog documents nest it as {"current": ...}
        slug = slug.get("current")
    return ProductSnapshot.create(
        id=raw.get("_id"),
        name=raw.get("name"),
        price=price,
        discount=discount or None,
        in_stock=raw.get("inStock", True),
        images=[str(i) for i in images],
        slug=slug if isinstance(slug, str) else None,
    )


# --- Cart ---------------------------------------------------------------------


def dump_cart(cart: Cart) -> str:
    return json.dumps(
        [
            {"product": product_to_raw(item.product), "quantity": item.quantity.value}
            for item in cart.items
        ]
    )


def load_cart(text: str) -> tuple[Cart, int]:
    """Parse a cart snapshot; returns the cart and how many entries were dropped."""
    entries = _load_list(text)
    cart = Cart()
    dropped = 0
    for entry in entries:
        try:
            line = _line_from_raw(entry)
        except ValidationError:
            dropped += 1
            continue
        if line.product_id in cart:
            cart.add(line.product, line.quantity)
        else:
            cart.items.append(line)
    return cart, dropped


def _line_from_raw(raw: Any) -> CartLineItem:
    if not isinstance(raw, dict):
        raise ValidationError("Cart entry is not an object")
    return CartLineItem(
        product=product_from_raw(raw.get("product")),
        quantity=Quantity(raw.get("quantity")),
    )


# --- Wishlist -----------------------------------------------------------------


def dump_wishlist(wishlist: Wishlist) -> str:
    return json.dumps([product_to_raw(p) for p in wishlist.items])


def load_wishlist(text: str) -> tuple[Wishlist, int]:
    entries = _load_list(text)
    wishlist = Wishlist()
    dropped = 0
    for entry in entries:
        try:
            wishlist.add(product_from_raw(entry))
        except ValidationError:
            dropped += 1
    return wishlist, dropped


# --- Helpers ------------------------------------------------------------------


def _load_list(text: str) -> list[Any]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ValidationError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValidationError(
            f"Snapshot must be a list, got {type(data).__name__}"
        )
    return data


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            return Decimal(value).is_finite()
        except ArithmeticError:
            return False
    return False
