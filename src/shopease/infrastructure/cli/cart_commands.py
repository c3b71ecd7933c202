"""CLI commands for a shopper's cart and wishlist."""

from __future__ import annotations

import click

from shopease.application.dto import CartOutcome
from shopease.domain.exceptions import DomainException
from shopease.domain.model.product import ProductSnapshot
from shopease.infrastructure.bootstrap import (
    cart_service,
    product_repository,
    wishlist_service,
)
from shopease.infrastructure.cli.common import display_cart, echo_outcome, to_click_error

shopper_option = click.option(
    "--shopper", default="guest", show_default=True, help="Whose cart to use."
)


def _lookup(product_id: str) -> ProductSnapshot:
    try:
        product = product_repository().get_by_id(product_id)
    except DomainException as exc:
        raise to_click_error(exc)
    if product is None:
        raise click.ClickException(f"Product '{product_id}' not found in the catalog")
    return product


def _finish(result) -> None:
    echo_outcome(result.outcome, result.message)
    display_cart(result.cart)
    if result.outcome == CartOutcome.PERSISTENCE_FAILED:
        raise click.ClickException("Cart changed but could not be saved")


@click.command("show")
@shopper_option
def cart_show(shopper: str) -> None:
    """Show the cart and its totals."""
    display_cart(cart_service(shopper).view().cart)


@click.command("add")
@shopper_option
@click.option("--product-id", required=True, help="Catalog product id.")
@click.option("--quantity", default=1, show_default=True, type=int, help="How many to add.")
def cart_add(shopper: str, product_id: str, quantity: int) -> None:
    """Add a catalog product to the cart."""
    product = _lookup(product_id)
    _finish(cart_service(shopper).add_item(product, quantity))


@click.command("remove")
@shopper_option
@click.option("--product-id", required=True, help="Product id to remove.")
def cart_remove(shopper: str, product_id: str) -> None:
    """Remove a product line from the cart."""
    _finish(cart_service(shopper).remove_item(product_id))


@click.command("update")
@shopper_option
@click.option("--product-id", required=True, help="Product id to change.")
@click.option("--quantity", required=True, type=int, help="New quantity (at least 1).")
def cart_update(shopper: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    _finish(cart_service(shopper).update_quantity(product_id, quantity))


@click.command("clear")
@shopper_option
def cart_clear(shopper: str) -> None:
    """Empty the cart."""
    _finish(cart_service(shopper).clear())


# --- Wishlist -----------------------------------------------------------------


def _display_wishlist(result) -> None:
    echo_outcome(result.outcome, result.message)
    if not result.items:
        click.echo("Your wishlist is empty.")
        return
    click.echo(f"{'ID':<38} {'Name':<28} {'Price':>14}  Stock")
    click.echo("-" * 90)
    for item in result.items:
        stock = "yes" if item.in_stock else "no"
        click.echo(f"{item.product_id:<38} {item.product_name:<28} {item.price:>14}  {stock}")


@click.command("show")
@shopper_option
def wishlist_show(shopper: str) -> None:
    """Show saved products."""
    _display_wishlist(wishlist_service(shopper).view())


@click.command("add")
@shopper_option
@click.option("--product-id", required=True, help="Catalog product id.")
def wishlist_add(shopper: str, product_id: str) -> None:
    """Save a catalog product for later."""
    _display_wishlist(wishlist_service(shopper).add(_lookup(product_id)))


@click.command("remove")
@shopper_option
@click.option("--product-id", required=True, help="Product id to drop.")
def wishlist_remove(shopper: str, product_id: str) -> None:
    """Drop a product from the wishlist."""
    _display_wishlist(wishlist_service(shopper).remove(product_id))
