"""Application service: Delete All Orders maintenance use case.

Runs a permission self-check (read, create, delete a probe document)
before touching any order, then deletes in fixed-size batches with one
transaction per batch.  The interactive confirmation lives in the CLI.
"""

from __future__ import annotations

import logging

from shopease.domain.exceptions import PermissionCheckError, PersistenceError
from shopease.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

BATCH_SIZE = 10
PROBE_DOCUMENT_ID = "test-permission-check"


class DeleteAllOrdersHandler:

    def __init__(self, order_repo: OrderRepository, batch_size: int = BATCH_SIZE) -> None:
        self._order_repo = order_repo
        self._batch_size = batch_size

    def check_permissions(self) -> None:
        """Raise PermissionCheckError unless the store allows read, write and delete."""
        step = "read"
        try:
            self._order_repo.list_all()
            step = "write"
            self._order_repo.create(
                {"_type": "test", "_id": PROBE_DOCUMENT_ID, "title": "Permission Test"}
            )
            step = "delete"
            self._order_repo.delete(PROBE_DOCUMENT_ID)
        except PersistenceError as exc:
            raise PermissionCheckError(f"{step.capitalize()} permission denied: {exc}") from exc
        logger.debug("Read, write and delete permissions OK")

    def pending(self) -> list[str]:
        """Order numbers that a run would delete."""
        return [o.order_id for o in self._order_repo.list_all()]

    def handle(self) -> int:
        """Delete every order; returns how many were deleted."""
        self.check_permissions()

        doc_ids = [o.doc_id for o in self._order_repo.list_all()]
        if not doc_ids:
            logger.info("No orders found to delete")
            return 0

        batches = [
            doc_ids[i:i + self._batch_size]
            for i in range(0, len(doc_ids), self._batch_size)
        ]
        for number, batch in enumerate(batches, start=1):
            logger.info("Processing batch %d/%d", number, len(batches))
            self._order_repo.transaction(batch)
            logger.info("Deleted %d orders", len(batch))
        return len(doc_ids)
