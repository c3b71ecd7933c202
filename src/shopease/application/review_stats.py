"""Application service: rating summary for one product.

Only approved reviews are counted.  The average is rounded half-up to
one decimal place; a product without reviews reports zeros.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from shopease.application.dto import ReviewStatsDTO
from shopease.domain.exceptions import ValidationError
from shopease.domain.model.review import ReviewStatus
from shopease.domain.repository.review_repository import ReviewRepository

ONE_DECIMAL = Decimal("0.1")


class ReviewStatsHandler:

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def handle(self, product_id: str) -> ReviewStatsDTO:
        if not product_id:
            raise ValidationError("Product ID is required")

        approved = [
            r
            for r in self._review_repo.list_for_product(product_id)
            if r.status == ReviewStatus.APPROVED
        ]
        distribution = {stars: 0 for stars in range(1, 6)}
        for review in approved:
            distribution[review.rating] += 1

        if approved:
            average = (
                Decimal(sum(r.rating for r in approved)) / len(approved)
            ).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
        else:
            average = Decimal("0.0")

        return ReviewStatsDTO(
            product_id=product_id,
            average_rating=average,
            total_reviews=len(approved),
            rating_distribution=distribution,
            verified_reviews=sum(1 for r in approved if r.verified_purchase),
        )
