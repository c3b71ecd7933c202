"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from shopease.application.snapshot import product_from_raw
from shopease.domain.model.product import ProductSnapshot
from shopease.domain.repository.product_repository import ProductRepository
from shopease.infrastructure.persistence.json_documents import JsonDocumentFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._documents = JsonDocumentFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> ProductSnapshot | None:
        raw = self._documents.first(lambda d: d.get("_id") == product_id)
        return product_from_raw(raw) if raw else None

    def list_all(self) -> list[ProductSnapshot]:
        return [product_from_raw(raw) for raw in self._documents.find(lambda d: True)]
