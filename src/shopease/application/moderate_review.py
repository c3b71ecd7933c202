"""Application service: Moderate Review use case (admin only)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from shopease.domain.exceptions import EntityNotFoundError
from shopease.domain.model.review import Review, ReviewStatus
from shopease.domain.repository.review_repository import ReviewRepository
from shopease.domain.service.session import SessionProvider, require_role

logger = logging.getLogger(__name__)


class ModerateReviewHandler:

    def __init__(
        self,
        review_repo: ReviewRepository,
        sessions: SessionProvider,
    ) -> None:
        self._review_repo = review_repo
        self._sessions = sessions

    def handle(self, review_id: str, status: str) -> Review:
        """Approve, reject or reopen a review."""
        admin = require_role(self._sessions)
        new_status = ReviewStatus.parse(status)

        if self._review_repo.get_by_id(review_id) is None:
            raise EntityNotFoundError(f"Review '{review_id}' not found")

        review = self._review_repo.patch(
            review_id,
            {
                "status": new_status.value,
                "updatedAt": datetime.now(timezone.utc).isoformat(),
            },
        )
        logger.info("Review %s set to '%s' by %s", review_id, new_status.value, admin.email)
        return review
