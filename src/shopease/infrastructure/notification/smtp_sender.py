"""Email notification senders."""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Any

from shopease.domain.service.notification import NotificationResult, NotificationSender
from shopease.infrastructure.config import Settings

logger = logging.getLogger(__name__)

GMAIL_HOST = "smtp.gmail.com"

STATUS_HEADLINES = {
    "pending": "We have received your order",
    "confirmed": "Your order is confirmed",
    "processing": "Your order is being prepared",
    "shipped": "Your order is on its way",
    "out_for_delivery": "Your order is out for delivery",
    "delivered": "Your order has been delivered",
    "cancelled": "Your order has been cancelled",
    "returned": "Your return has been processed",
    "refunded": "Your refund has been issued",
}


def render_status_email(
    name: str,
    order_summary: dict[str, Any],
    new_status: str,
    message: str,
) -> tuple[str, str]:
    """Return (subject, plain-text body) for a status update email."""
    order_id = order_summary.get("orderId", "")
    headline = STATUS_HEADLINES.get(new_status, f"Order status: {new_status}")
    subject = f"{headline} - Order #{order_id}"
    lines = [
        f"Hi {name},",
        "",
        message,
        "",
        f"Order:  #{order_id}",
        f"Status: {new_status.replace('_', ' ').title()}",
        f"Total:  Rs {order_summary.get('totalAmount', 0)}",
        "",
        "Thank you for shopping with Rushk.pk.",
    ]
    return subject, "\n".join(lines)


class SmtpNotificationSender(NotificationSender):
    """Sends plain-text email over SMTP (Gmail when no host is configured)."""

    def __init__(self, settings: Settings, timeout: float = 10.0) -> None:
        self._settings = settings
        self._timeout = timeout

    def send_order_status_update(
        self,
        email: str,
        name: str,
        order_summary: dict[str, Any],
        new_status: str,
        message: str,
    ) -> NotificationResult:
        subject, body = render_status_email(name, order_summary, new_status, message)

        msg = EmailMessage()
        msg["From"] = f"Rushk.pk <{self._settings.smtp_user}>"
        msg["To"] = email
        msg["Subject"] = subject
        msg.set_content(body)

        host = self._settings.smtp_host or GMAIL_HOST
        try:
            if self._settings.smtp_secure:
                client: smtplib.SMTP = smtplib.SMTP_SSL(
                    host, self._settings.smtp_port, timeout=self._timeout
                )
            else:
                client = smtplib.SMTP(host, self._settings.smtp_port, timeout=self._timeout)
            with client:
                if not self._settings.smtp_secure:
                    client.starttls()
                client.login(self._settings.smtp_user or "", self._settings.smtp_password or "")
                client.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery to %s failed: %s", email, exc)
            return NotificationResult(success=False, message=f"Failed to send email: {exc}")

        logger.info("Status update email sent to %s", email)
        return NotificationResult(success=True, message="Email sent successfully")


class LoggingNotificationSender(NotificationSender):
    """Stand-in used when SMTP is not configured: logs and reports not-sent."""

    def send_order_status_update(
        self,
        email: str,
        name: str,
        order_summary: dict[str, Any],
        new_status: str,
        message: str,
    ) -> NotificationResult:
        subject, _ = render_status_email(name, order_summary, new_status, message)
        logger.warning("Email service not configured; would send %r to %s", subject, email)
        return NotificationResult(success=False, message="Email service not configured")
