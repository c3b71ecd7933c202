import logging

import click

from shopease.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
    wishlist_add,
    wishlist_remove,
    wishlist_show,
)
from shopease.infrastructure.cli.catalog_commands import (
    product_list,
    review_moderate,
    review_respond,
    review_stats,
    review_submit,
)
from shopease.infrastructure.cli.order_commands import (
    order_delete_all,
    order_update_status,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """ShopEase — Rushk.pk storefront tools"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def cart() -> None:
    """Manage a shopper's cart."""


@cli.group()
def wishlist() -> None:
    """Manage a shopper's wishlist."""


@cli.group()
def order() -> None:
    """Administer orders."""


@cli.group()
def product() -> None:
    """Inspect the catalog."""


@cli.group()
def review() -> None:
    """Submit, summarise and moderate reviews."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
wishlist.add_command(wishlist_add)
wishlist.add_command(wishlist_remove)
wishlist.add_command(wishlist_show)
order.add_command(order_delete_all)
order.add_command(order_update_status)
product.add_command(product_list)
review.add_command(review_moderate)
review.add_command(review_respond)
review.add_command(review_stats)
review.add_command(review_submit)
