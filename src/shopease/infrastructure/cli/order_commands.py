"""CLI commands for order administration and maintenance."""

from __future__ import annotations

import time

import click

from shopease.application.delete_orders import DeleteAllOrdersHandler
from shopease.application.update_order_status import UpdateOrderStatusHandler
from shopease.domain.exceptions import DomainException, PermissionCheckError
from shopease.domain.model.order import OrderStatus
from shopease.infrastructure.bootstrap import notification_sender, order_repository
from shopease.infrastructure.cli.common import to_click_error

CONFIRM_DELAY_SECONDS = 5


@click.command("update-status")
@click.option("--id", "order_ref", required=True, help="Order number or document id.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New order status.",
)
@click.option("--description", default=None, help="Note for the timeline and email.")
@click.option("--location", default=None, help="Where the parcel is now.")
def order_update_status(
    order_ref: str, status: str, description: str | None, location: str | None
) -> None:
    """Move an order to a new status and notify the customer."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        notifier=notification_sender(),
    )

    try:
        result = handler.handle(order_ref, status, description, location)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(
        f"Order #{result.order_id} updated  "
        f"(status={result.status}, payment={result.payment_status})"
    )
    if result.notification is None:
        click.echo("No customer email on file; notification skipped.")
    elif result.notification == "sent":
        click.echo("Customer notified by email.")
    else:
        click.secho(f"Email not sent ({result.notification})", fg="yellow", err=True)


@click.command("delete-all")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation delay.")
def order_delete_all(yes: bool) -> None:
    """Permanently delete every order (after a permission check)."""
    handler = DeleteAllOrdersHandler(order_repo=order_repository())

    try:
        handler.check_permissions()
        pending = handler.pending()
    except PermissionCheckError as exc:
        raise click.ClickException(f"{exc}. The store credentials need write access.")
    except DomainException as exc:
        raise to_click_error(exc)

    if not pending:
        click.echo("No orders found to delete.")
        return

    click.echo(f"Found {len(pending)} orders to delete:")
    for number, order_id in enumerate(pending, start=1):
        click.echo(f"   {number}. {order_id}")

    if not yes:
        click.secho("WARNING: This will permanently delete all orders!", fg="red")
        click.echo(f"Press Ctrl+C to cancel. Continuing in {CONFIRM_DELAY_SECONDS} seconds...")
        time.sleep(CONFIRM_DELAY_SECONDS)

    try:
        deleted = handler.handle()
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Deleted {deleted} orders.")
