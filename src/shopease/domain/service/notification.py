"""Outbound customer notifications.

Senders are best-effort: a failed delivery is reported through
``NotificationResult`` and must never undo the write that triggered it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    message: str


class NotificationSender(ABC):

    @abstractmethod
    def send_order_status_update(
        self,
        email: str,
        name: str,
        order_summary: dict[str, Any],
        new_status: str,
        message: str,
    ) -> NotificationResult:
        """Tell the customer their order moved to *new_status*."""
