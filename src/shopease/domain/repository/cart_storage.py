"""Abstract key-value storage for cart and wishlist snapshots.

Snapshots are opaque text (JSON) as far as storage is concerned; the
services own serialization and validation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CartStorage(ABC):

    @abstractmethod
    def load(self, key: str) -> str | None:
        """Return the snapshot stored under *key*, or None if absent.

        Raises PersistenceError if the slot exists but cannot be read.
        """

    @abstractmethod
    def save(self, key: str, snapshot: str) -> None:
        """Replace the snapshot under *key*. Raises PersistenceError on failure."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop the snapshot under *key*; absent keys are fine."""
