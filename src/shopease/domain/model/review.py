"""Product review awaiting or past moderation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from shopease.domain.exceptions import ValidationError


class ReviewStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @staticmethod
    def parse(raw: str) -> ReviewStatus:
        try:
            return ReviewStatus(raw)
        except ValueError:
            raise ValidationError(f"Invalid review status '{raw}'") from None


@dataclass
class Review:
    id: str
    product_id: str
    user_id: str
    rating: int
    title: str = ""
    comment: str = ""
    status: ReviewStatus = ReviewStatus.PENDING
    verified_purchase: bool = False
    admin_response: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValidationError("Rating must be an integer")
        if not 1 <= self.rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")
