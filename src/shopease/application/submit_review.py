"""Application service: Submit Review use case (any signed-in shopper)."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from shopease.domain.exceptions import ValidationError
from shopease.domain.model.review import Review, ReviewStatus
from shopease.domain.repository.review_repository import ReviewRepository
from shopease.domain.service.session import SessionProvider, require_user

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 100
MAX_COMMENT_LENGTH = 1000

# New reviews are published immediately; moderation can reject them later.
INITIAL_STATUS = ReviewStatus.APPROVED


class SubmitReviewHandler:

    def __init__(
        self,
        review_repo: ReviewRepository,
        sessions: SessionProvider,
    ) -> None:
        self._review_repo = review_repo
        self._sessions = sessions

    def handle(
        self,
        product_id: str,
        rating: int | None,
        title: str | None = None,
        comment: str | None = None,
    ) -> Review:
        """Create a review of *product_id* by the signed-in user.

        A shopper gets one live review per product.  A rejected review
        does not count, so it can be replaced by a new submission.
        """
        user = require_user(self._sessions)

        if not product_id or rating is None:
            raise ValidationError("Product ID and rating are required")

        title = (title or "").strip()
        comment = (comment or "").strip()
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
        if len(comment) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
            )

        for existing in self._review_repo.list_for_product(product_id):
            if existing.user_id == user.id and existing.status != ReviewStatus.REJECTED:
                raise ValidationError("You have already reviewed this product")

        review = Review(
            id=uuid.uuid4().hex,
            product_id=product_id,
            user_id=user.id,
            rating=rating,
            title=title,
            comment=comment,
            status=INITIAL_STATUS,
            updated_at=datetime.now(timezone.utc),
        )
        self._review_repo.add(review)
        logger.info("Review %s of product %s submitted by %s", review.id, product_id, user.email)
        return review
