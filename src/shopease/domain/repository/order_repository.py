"""Abstract repository for Order documents.

Defined in the domain layer so the domain never depends on
infrastructure.  The document store behind it exposes patch, create,
delete and transaction primitives; each ``patch`` is one atomic write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shopease.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_order_id(self, order_id: str) -> Order | None:
        """Return an order by its human-facing order number, or None."""

    @abstractmethod
    def get_by_doc_id(self, doc_id: str) -> Order | None:
        """Return an order by its store document id, or None."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order document."""

    @abstractmethod
    def patch(self, doc_id: str, fields: dict[str, Any]) -> Order:
        """Set *fields* on one document in a single write and return it."""

    @abstractmethod
    def create(self, document: dict[str, Any]) -> str:
        """Store a new document and return its id."""

    @abstractmethod
    def delete(self, doc_id: str) -> None:
        """Delete one document."""

    @abstractmethod
    def transaction(self, delete_ids: list[str]) -> None:
        """Delete every listed document atomically: all or none."""
