"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopease.application.cart_service import CartService
from shopease.application.wishlist_service import WishlistService
from shopease.domain.service.notification import NotificationSender
from shopease.infrastructure.config import Settings
from shopease.infrastructure.notification.smtp_sender import (
    LoggingNotificationSender,
    SmtpNotificationSender,
)
from shopease.infrastructure.persistence.json_cart_storage import JsonCartStorage
from shopease.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopease.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopease.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)
from shopease.infrastructure.session import FileSessionProvider


def settings() -> Settings:
    return Settings.from_env()


def cart_storage() -> JsonCartStorage:
    return JsonCartStorage(settings().data_dir / "carts")


def cart_service(shopper: str) -> CartService:
    service = CartService(cart_storage(), key=f"{shopper}.cart")
    service.restore()
    return service


def wishlist_service(shopper: str) -> WishlistService:
    service = WishlistService(cart_storage(), key=f"{shopper}.wishlist")
    service.restore()
    return service


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def review_repository() -> JsonReviewRepository:
    return JsonReviewRepository(settings().data_dir / "reviews.json")


def session_provider() -> FileSessionProvider:
    cfg = settings()
    return FileSessionProvider(cfg.session_file or cfg.data_dir / "session.json")


def notification_sender() -> NotificationSender:
    cfg = settings()
    if cfg.smtp_configured:
        return SmtpNotificationSender(cfg)
    return LoggingNotificationSender()
