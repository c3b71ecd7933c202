"""A JSON file holding a list of store documents.

Each collection (orders, products, reviews) is one file.  Every mutating
call reads the file, applies its change in memory and writes the file
back once, so a patch or a transaction lands as a single write.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from shopease.domain.exceptions import EntityNotFoundError, PersistenceError

Document = dict[str, Any]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as the store writes it (trailing ``Z`` included)."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class JsonDocumentFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def find(self, predicate: Callable[[Document], bool]) -> list[Document]:
        return [doc for doc in self._load_raw() if predicate(doc)]

    def first(self, predicate: Callable[[Document], bool]) -> Document | None:
        for doc in self._load_raw():
            if predicate(doc):
                return doc
        return None

    def patch(self, doc_id: str, fields: Document) -> Document:
        docs = self._load_raw()
        for doc in docs:
            if doc.get("_id") == doc_id:
                doc.update(fields)
                self._persist_raw(docs)
                return doc
        raise EntityNotFoundError(f"Document '{doc_id}' not found")

    def create(self, document: Document) -> str:
        if "_id" not in document:
            raise PersistenceError("Documents need an '_id'")
        docs = self._load_raw()
        if any(doc.get("_id") == document["_id"] for doc in docs):
            raise PersistenceError(f"Document '{document['_id']}' already exists")
        docs.append(dict(document))
        self._persist_raw(docs)
        return document["_id"]

    def delete_many(self, doc_ids: list[str]) -> None:
        wanted = set(doc_ids)
        docs = self._load_raw()
        missing = wanted - {doc.get("_id") for doc in docs}
        if missing:
            raise EntityNotFoundError(
                f"Document(s) not found: {', '.join(sorted(missing))}"
            )
        self._persist_raw([doc for doc in docs if doc.get("_id") not in wanted])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[Document]:
        if not self._file_path.exists():
            return []
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path.name}: {exc}") from exc
        if not isinstance(data, list):
            raise PersistenceError(f"{self._file_path.name} does not hold a list")
        return data

    def _persist_raw(self, docs: list[Document]) -> None:
        tmp = self._file_path.with_suffix(".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")
            tmp.replace(self._file_path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path.name}: {exc}") from exc
