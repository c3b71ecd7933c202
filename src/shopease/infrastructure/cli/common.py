"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from shopease.application.dto import CartDTO, CartOutcome
from shopease.domain.exceptions import (
    AuthorizationError,
    DomainException,
    PersistenceError,
)
from shopease.infrastructure.bootstrap import settings


class AuthorizationFailed(click.ClickException):
    exit_code = 3


def to_click_error(exc: DomainException) -> click.ClickException:
    """Map a domain error to a CLI error.

    Store failures only show their detail outside production.
    """
    if isinstance(exc, AuthorizationError):
        return AuthorizationFailed(str(exc))
    if isinstance(exc, PersistenceError):
        if settings().expose_error_details:
            return click.ClickException(f"Store error: {exc}")
        return click.ClickException("Internal server error")
    return click.ClickException(str(exc))


def echo_outcome(outcome: CartOutcome, message: str) -> None:
    """Report a non-OK cart/wishlist outcome without aborting."""
    if outcome == CartOutcome.OK:
        return
    label = outcome.value.replace("_", " ")
    click.secho(f"{label}: {message}", fg="yellow", err=True)


def display_cart(cart: CartDTO) -> None:
    if not cart.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*64}")
    for item in cart.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Items':<28} {cart.total_item_count:>5}")
    click.echo(f"  {'Subtotal':<34} {cart.subtotal:>29}")
    click.echo(f"  {'Tax (10%)':<34} {cart.tax:>29}")
    click.echo(f"  {'Shipping':<34} {cart.shipping:>29}")
    click.echo(f"  {'Total':<34} {cart.total:>29}")
