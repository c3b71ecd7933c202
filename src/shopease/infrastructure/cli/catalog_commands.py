"""CLI commands for the catalog and product reviews."""

from __future__ import annotations

import click

from shopease.application.list_products import ListProductsHandler
from shopease.application.moderate_review import ModerateReviewHandler
from shopease.application.respond_to_review import RespondToReviewHandler
from shopease.application.review_stats import ReviewStatsHandler
from shopease.application.submit_review import SubmitReviewHandler
from shopease.domain.exceptions import DomainException
from shopease.domain.model.review import ReviewStatus
from shopease.infrastructure.bootstrap import (
    product_repository,
    review_repository,
    session_provider,
)
from shopease.infrastructure.cli.common import to_click_error


@click.command("list")
@click.option("--check-id", default=None, help="Also report whether this product id exists.")
def product_list(check_id: str | None) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        report = handler.handle(check_id=check_id)
    except DomainException as exc:
        raise to_click_error(exc)

    if not report.products:
        click.echo("No products found.")
    else:
        click.echo(f"Found {len(report.products)} products:")
        for p in report.products:
            stock = "in stock" if p.in_stock else "out of stock"
            click.echo(f"- {p.id}: {p.name} ({p.slug or '-'}) {p.price} - {stock}")

    if report.checked_id is not None:
        if report.checked_found:
            click.echo(f"Product {report.checked_id} found.")
        else:
            click.echo(f"Product {report.checked_id} NOT FOUND in the catalog.")


@click.command("moderate")
@click.option("--id", "review_id", required=True, help="Review id.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in ReviewStatus]),
    help="New review status.",
)
def review_moderate(review_id: str, status: str) -> None:
    """Approve, reject or reopen a review (admins only)."""
    handler = ModerateReviewHandler(
        review_repo=review_repository(),
        sessions=session_provider(),
    )

    try:
        review = handler.handle(review_id, status)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Review {review.id} is now {review.status.value}.")


@click.command("respond")
@click.option("--id", "review_id", required=True, help="Review id.")
@click.option("--message", required=True, help="Public reply shown under the review.")
def review_respond(review_id: str, message: str) -> None:
    """Reply to a review (admins only)."""
    handler = RespondToReviewHandler(
        review_repo=review_repository(),
        sessions=session_provider(),
    )

    try:
        review = handler.handle(review_id, message)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Response added to review {review.id}.")


@click.command("submit")
@click.option("--product-id", required=True, help="Product being reviewed.")
@click.option("--rating", required=True, type=int, help="Stars, 1 to 5.")
@click.option("--title", default=None, help="Short headline.")
@click.option("--comment", default=None, help="Review text.")
def review_submit(
    product_id: str, rating: int, title: str | None, comment: str | None
) -> None:
    """Review a product as the signed-in shopper."""
    handler = SubmitReviewHandler(
        review_repo=review_repository(),
        sessions=session_provider(),
    )

    try:
        review = handler.handle(product_id, rating, title, comment)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Review {review.id} submitted.")


@click.command("stats")
@click.option("--product-id", required=True, help="Product to summarise.")
def review_stats(product_id: str) -> None:
    """Show the rating summary of a product."""
    handler = ReviewStatsHandler(review_repo=review_repository())

    try:
        stats = handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(
        f"Product {stats.product_id}: {stats.average_rating} average from "
        f"{stats.total_reviews} reviews ({stats.verified_reviews} verified)"
    )
    for stars in range(5, 0, -1):
        click.echo(f"  {stars} stars: {stats.rating_distribution[stars]}")
