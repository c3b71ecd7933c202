"""JSON-file-backed implementation of ReviewRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shopease.domain.exceptions import PersistenceError, ValidationError
from shopease.domain.model.review import Review, ReviewStatus
from shopease.domain.repository.review_repository import ReviewRepository
from shopease.infrastructure.persistence.json_documents import (
    JsonDocumentFile,
    parse_timestamp,
)

REVIEW_TYPE = "review"


def _is_review(doc: dict) -> bool:
    return doc.get("_type", REVIEW_TYPE) == REVIEW_TYPE


class JsonReviewRepository(ReviewRepository):

    def __init__(self, file_path: Path) -> None:
        self._documents = JsonDocumentFile(file_path)

    def get_by_id(self, review_id: str) -> Review | None:
        raw = self._documents.first(
            lambda d: _is_review(d) and d.get("_id") == review_id
        )
        return self._to_domain(raw) if raw else None

    def list_for_product(self, product_id: str) -> list[Review]:
        return [
            self._to_domain(raw)
            for raw in self._documents.find(
                lambda d: _is_review(d)
                and (d.get("product") or {}).get("_ref") == product_id
            )
        ]

    def add(self, review: Review) -> None:
        self._documents.create(self._to_raw(review))

    def patch(self, review_id: str, fields: dict[str, Any]) -> Review:
        return self._to_domain(self._documents.patch(review_id, fields))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(review: Review) -> dict[str, Any]:
        stamp = (review.updated_at or datetime.now(timezone.utc)).isoformat()
        raw: dict[str, Any] = {
            "_id": review.id,
            "_type": REVIEW_TYPE,
            "product": {"_type": "reference", "_ref": review.product_id},
            "user": {"_type": "reference", "_ref": review.user_id},
            "rating": review.rating,
            "title": review.title,
            "comment": review.comment,
            "verifiedPurchase": review.verified_purchase,
            "helpfulVotes": 0,
            "notHelpfulVotes": 0,
            "status": review.status.value,
            "createdAt": stamp,
            "updatedAt": stamp,
        }
        if review.admin_response:
            raw["adminResponse"] = review.admin_response
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Review:
        updated_at = raw.get("updatedAt")
        try:
            return Review(
                id=raw["_id"],
                product_id=(raw.get("product") or {}).get("_ref", ""),
                user_id=(raw.get("user") or {}).get("_ref", ""),
                rating=raw["rating"],
                title=raw.get("title") or "",
                comment=raw.get("comment") or "",
                status=ReviewStatus(raw.get("status", ReviewStatus.PENDING.value)),
                verified_purchase=bool(raw.get("verifiedPurchase", False)),
                admin_response=raw.get("adminResponse"),
                updated_at=parse_timestamp(updated_at) if updated_at else None,
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(
                f"Malformed review document '{raw.get('_id', '?')}': {exc}"
            ) from exc
