"""Abstract repository for catalog products."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopease.domain.model.product import ProductSnapshot


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> ProductSnapshot | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[ProductSnapshot]:
        """Return every product in the catalog."""
