"""Application service: Respond To Review use case (admin only)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from shopease.domain.exceptions import EntityNotFoundError, ValidationError
from shopease.domain.model.review import Review
from shopease.domain.repository.review_repository import ReviewRepository
from shopease.domain.service.session import SessionProvider, require_role

logger = logging.getLogger(__name__)


class RespondToReviewHandler:

    def __init__(
        self,
        review_repo: ReviewRepository,
        sessions: SessionProvider,
    ) -> None:
        self._review_repo = review_repo
        self._sessions = sessions

    def handle(self, review_id: str, response: str | None) -> Review:
        admin = require_role(self._sessions)

        text = (response or "").strip()
        if not text:
            raise ValidationError("Admin response is required")

        if self._review_repo.get_by_id(review_id) is None:
            raise EntityNotFoundError(f"Review '{review_id}' not found")

        review = self._review_repo.patch(
            review_id,
            {
                "adminResponse": text,
                "updatedAt": datetime.now(timezone.utc).isoformat(),
            },
        )
        logger.info("Admin %s responded to review %s", admin.email, review_id)
        return review
