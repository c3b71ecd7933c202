"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

from shopease.domain.exceptions import PersistenceError, ValidationError
from shopease.domain.model.order import (
    Customer,
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentStatus,
    TimelineEvent,
)
from shopease.domain.model.value_objects import Money, Quantity
from shopease.domain.repository.order_repository import OrderRepository
from shopease.infrastructure.persistence.json_documents import (
    JsonDocumentFile,
    parse_timestamp,
)

ORDER_TYPE = "order"


def _is_order(doc: dict) -> bool:
    return doc.get("_type", ORDER_TYPE) == ORDER_TYPE


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._documents = JsonDocumentFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_order_id(self, order_id: str) -> Order | None:
        raw = self._documents.first(
            lambda d: _is_order(d) and d.get("orderId") == order_id
        )
        return self._to_domain(raw) if raw else None

    def get_by_doc_id(self, doc_id: str) -> Order | None:
        raw = self._documents.first(lambda d: _is_order(d) and d.get("_id") == doc_id)
        return self._to_domain(raw) if raw else None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._documents.find(_is_order)]

    def patch(self, doc_id: str, fields: dict[str, Any]) -> Order:
        return self._to_domain(self._documents.patch(doc_id, fields))

    def create(self, document: dict[str, Any]) -> str:
        return self._documents.create(document)

    def delete(self, doc_id: str) -> None:
        self._documents.delete_many([doc_id])

    def transaction(self, delete_ids: list[str]) -> None:
        self._documents.delete_many(delete_ids)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        try:
            return _order_from_raw(raw)
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise PersistenceError(
                f"Malformed order document '{raw.get('_id', '?')}': {exc}"
            ) from exc


def _order_from_raw(raw: dict) -> Order:
    customer = raw.get("customer") or {}
    updated_at = raw.get("updatedAt")
    return Order(
        doc_id=raw["_id"],
        order_id=raw.get("orderId") or raw["_id"],
        customer=Customer(
            full_name=customer.get("fullName") or "Customer",
            email=customer.get("email"),
            phone=customer.get("phone"),
            address=customer.get("address"),
            city=customer.get("city"),
            zip_code=customer.get("zipCode"),
        ),
        items=[
            OrderLineItem(
                product_id=_reference(i["productId"]),
                product_name=i["productName"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(str(i["price"]))),
            )
            for i in raw.get("items", [])
        ],
        total_amount=Money(Decimal(str(_total_amount(raw)))),
        status=OrderStatus(raw.get("status", OrderStatus.PENDING.value)),
        payment_status=PaymentStatus(
            raw.get("paymentStatus", PaymentStatus.PENDING.value)
        ),
        timeline=[
            TimelineEvent(
                status=str(e["status"]),
                timestamp=parse_timestamp(e["timestamp"]),
                description=e.get("description", ""),
                location=e.get("location"),
                raw=dict(e),
            )
            for e in raw.get("timeline", [])
        ],
        updated_at=parse_timestamp(updated_at) if updated_at else None,
    )


def _reference(value: Any) -> str:
    # checkout stores product ids as {"_type": "reference", "_ref": ...}
    if isinstance(value, dict):
        return value["_ref"]
    return value


def _total_amount(raw: dict) -> Any:
    pricing = raw.get("pricing") or {}
    return pricing.get("totalAmount", raw.get("totalAmount", "0"))
