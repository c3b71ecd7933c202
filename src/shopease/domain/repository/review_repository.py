"""Abstract repository for reviews."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shopease.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def get_by_id(self, review_id: str) -> Review | None:
        """Return a review by its ID, or None if not found."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Review]:
        """Return every review of one product, whatever its status."""

    @abstractmethod
    def add(self, review: Review) -> None:
        """Store a new review. Fails if the ID is already taken."""

    @abstractmethod
    def patch(self, review_id: str, fields: dict[str, Any]) -> Review:
        """Set *fields* on one review in a single write and return it."""
