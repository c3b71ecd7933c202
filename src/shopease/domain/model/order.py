"""Order entity — owned by the document store, consumed here.

Orders are produced once by checkout from a cart snapshot.  This module
only carries the rules that apply when an administrator moves an order
through its fulfilment statuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from shopease.domain.exceptions import ValidationError
from shopease.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"
    REFUNDED = "refunded"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid order status '{raw}' (expected one of: {allowed})"
            ) from None


class PaymentStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"


@dataclass(frozen=True)
class Customer:
    full_name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    zip_code: str | None = None


@dataclass(frozen=True)
class OrderLineItem:
    """Price-at-purchase snapshot of one product."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class TimelineEvent:
    """One entry of an order's tracking history.

    ``status`` is free text: checkout writes labels such as "Order Placed",
    status changes write an ``OrderStatus`` value.  ``raw`` keeps the stored
    entry as read so it is written back untouched.
    """

    status: str
    timestamp: datetime
    description: str
    location: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass
class Order:
    """An order document as held by the store.

    ``doc_id`` is the store's own document id; ``order_id`` is the
    human-facing order number printed on receipts.
    """

    doc_id: str
    order_id: str
    customer: Customer
    items: list[OrderLineItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    timeline: list[TimelineEvent] = field(default_factory=list)
    updated_at: datetime | None = None

    def status_change(
        self,
        new_status: OrderStatus,
        description: str | None = None,
        location: str | None = None,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Build the complete field set for moving to *new_status*.

        Delivery always settles payment, so ``paymentStatus`` is forced to
        ``paid`` in the same field set whatever its previous value.  Every
        other transition leaves payment untouched.  The caller must write
        the returned fields as one patch.
        """
        now = now or datetime.now(timezone.utc)
        event = TimelineEvent(
            status=new_status.value,
            timestamp=now,
            description=description or f"Order status updated to {new_status.value}",
            location=location,
        )
        fields: dict[str, Any] = {
            "status": new_status.value,
            "updatedAt": now.isoformat(),
            "timeline": [_timeline_to_raw(e) for e in [*self.timeline, event]],
        }
        if new_status == OrderStatus.DELIVERED:
            fields["paymentStatus"] = PaymentStatus.PAID.value
        return fields

    @property
    def summary(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "totalAmount": str(self.total_amount.amount),
            "items": [
                {
                    "productName": item.product_name,
                    "quantity": item.quantity.value,
                    "price": str(item.unit_price.amount),
                }
                for item in self.items
            ],
        }


def _timeline_to_raw(event: TimelineEvent) -> dict[str, Any]:
    if event.raw:
        return dict(event.raw)
    raw: dict[str, Any] = {
        "status": event.status,
        "timestamp": event.timestamp.isoformat(),
        "description": event.description,
    }
    if event.location:
        raw["location"] = event.location
    return raw
