"""JSON-file-backed implementation of CartStorage.

One file per key inside a directory, e.g. ``carts/alice.cart.json``.
"""

from __future__ import annotations

import re
from pathlib import Path

from shopease.domain.exceptions import PersistenceError
from shopease.domain.repository.cart_storage import CartStorage

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonCartStorage(CartStorage):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- CartStorage interface ------------------------------------------------

    def load(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read {path.name}: {exc}") from exc

    def save(self, key: str, snapshot: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(snapshot + "\n", encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {path.name}: {exc}") from exc

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot delete {path.name}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise PersistenceError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
