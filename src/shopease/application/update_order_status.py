"""Application service: Update Order Status use case.

Two phases, in this order:

1. One combined patch carrying the new status, the timeline entry and,
   for deliveries, the forced ``paid`` payment status.
2. A best-effort email to the customer.  Whatever happens here is
   captured on the result; it never turns a committed update into a
   failure.
"""

from __future__ import annotations

import logging

from shopease.application.dto import OrderStatusUpdateResult
from shopease.domain.exceptions import EntityNotFoundError, ValidationError
from shopease.domain.model.order import Order, OrderStatus
from shopease.domain.repository.order_repository import OrderRepository
from shopease.domain.service.notification import NotificationSender

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        notifier: NotificationSender,
    ) -> None:
        self._order_repo = order_repo
        self._notifier = notifier

    def handle(
        self,
        order_ref: str,
        status: str,
        description: str | None = None,
        location: str | None = None,
    ) -> OrderStatusUpdateResult:
        """Move an order to *status*.

        Args:
            order_ref: The order number, or failing that the store document id.
            status: Target status value, e.g. ``"delivered"``.
            description: Optional note for the timeline and the email.
            location: Optional location for the timeline entry.
        """
        if not order_ref or not status:
            raise ValidationError("Order ID and status are required")
        new_status = OrderStatus.parse(status)

        order = self._find(order_ref)

        fields = order.status_change(new_status, description, location)
        if "paymentStatus" in fields:
            logger.info(
                "Order %s delivered; payment status set to '%s'",
                order.order_id,
                fields["paymentStatus"],
            )
        updated = self._order_repo.patch(order.doc_id, fields)
        logger.info("Order %s moved to '%s'", updated.order_id, new_status.value)

        notification = self._notify(
            order,
            new_status,
            description or f"Order status updated to {new_status.value}",
        )

        return OrderStatusUpdateResult(
            success=True,
            order_id=updated.order_id,
            status=updated.status.value,
            payment_status=updated.payment_status.value,
            notification=notification,
        )

    def _find(self, order_ref: str) -> Order:
        order = self._order_repo.get_by_order_id(order_ref)
        if order is None:
            order = self._order_repo.get_by_doc_id(order_ref)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_ref}' not found by orderId or _id")
        return order

    def _notify(self, order: Order, status: OrderStatus, message: str) -> str | None:
        email = order.customer.email
        if not email:
            logger.info("No customer email on order %s; skipping notification", order.order_id)
            return None

        try:
            result = self._notifier.send_order_status_update(
                email,
                order.customer.full_name or "Customer",
                order.summary,
                status.value,
                message,
            )
        except Exception as exc:  # sender failures never fail the update
            logger.exception("Status email for order %s failed", order.order_id)
            return f"failed: {exc}"

        if not result.success:
            logger.warning(
                "Status email for order %s not sent: %s", order.order_id, result.message
            )
            return f"failed: {result.message}"
        return "sent"
