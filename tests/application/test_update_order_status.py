"""Integration tests for the UpdateOrderStatus use case."""

import smtplib

import pytest

from shopease.application.update_order_status import UpdateOrderStatusHandler
from shopease.domain.exceptions import EntityNotFoundError, ValidationError
from shopease.domain.model.order import (
    Customer,
    Order,
    OrderStatus,
    PaymentStatus,
)
from shopease.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, RecordingNotificationSender


def _order(payment=PaymentStatus.PENDING, email="ayesha@example.com") -> Order:
    return Order(
        doc_id="doc-1",
        order_id="ORD-1001",
        customer=Customer(full_name="Ayesha Khan", email=email),
        items=[],
        total_amount=Money.of("2376"),
        status=OrderStatus.SHIPPED,
        payment_status=payment,
    )


def _setup(order=None, notifier=None):
    repo = FakeOrderRepository([order or _order()])
    notifier = notifier or RecordingNotificationSender()
    return UpdateOrderStatusHandler(repo, notifier), repo, notifier


class TestDelivered:

    @pytest.mark.parametrize("payment", [PaymentStatus.PENDING, PaymentStatus.FAILED])
    def test_delivered_marks_paid_in_one_write(self, payment):
        handler, repo, _ = _setup(_order(payment))

        result = handler.handle("ORD-1001", "delivered")

        assert result.success is True
        assert result.payment_status == "paid"
        assert len(repo.patches) == 1
        doc_id, fields = repo.patches[0]
        assert doc_id == "doc-1"
        assert fields["status"] == "delivered"
        assert fields["paymentStatus"] == "paid"

    def test_notification_exception_does_not_fail_update(self):
        notifier = RecordingNotificationSender(raise_error=smtplib.SMTPException("boom"))
        handler, repo, _ = _setup(notifier=notifier)

        result = handler.handle("ORD-1001", "delivered")

        assert result.success is True
        assert result.payment_status == "paid"
        assert result.notification.startswith("failed")
        assert repo.get_by_doc_id("doc-1").status == OrderStatus.DELIVERED

    def test_unsuccessful_notification_reported(self):
        handler, _, _ = _setup(notifier=RecordingNotificationSender(succeed=False))
        result = handler.handle("ORD-1001", "delivered")
        assert result.success is True
        assert result.notification == "failed: SMTP rejected"


class TestOtherTransitions:

    def test_payment_untouched(self):
        handler, repo, _ = _setup(_order(PaymentStatus.PENDING))
        result = handler.handle("ORD-1001", "out_for_delivery", "With rider", "Karachi")

        assert result.payment_status == "pending"
        _, fields = repo.patches[0]
        assert "paymentStatus" not in fields
        assert fields["timeline"][-1]["location"] == "Karachi"

    def test_customer_notified_with_summary(self):
        handler, _, notifier = _setup()
        result = handler.handle("ORD-1001", "processing")

        assert result.notification == "sent"
        sent = notifier.sent[0]
        assert sent["email"] == "ayesha@example.com"
        assert sent["name"] == "Ayesha Khan"
        assert sent["status"] == "processing"
        assert sent["summary"]["orderId"] == "ORD-1001"
        assert sent["message"] == "Order status updated to processing"

    def test_no_email_skips_notification(self):
        handler, _, notifier = _setup(_order(email=None))
        result = handler.handle("ORD-1001", "shipped")
        assert result.notification is None
        assert notifier.sent == []


class TestLookup:

    def test_falls_back_to_document_id(self):
        handler, _, _ = _setup()
        assert handler.handle("doc-1", "processing").order_id == "ORD-1001"

    def test_unknown_order(self):
        handler, repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("ORD-404", "shipped")
        assert repo.patches == []

    def test_missing_fields(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="required"):
            handler.handle("", "shipped")

    def test_unknown_status(self):
        handler, repo, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid order status"):
            handler.handle("ORD-1001", "teleported")
        assert repo.patches == []
