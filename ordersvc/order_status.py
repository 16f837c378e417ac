"""Lifecycle status of an order."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class StatusKind(enum.Enum):
    """The kinds of state an order can be in; values are their stored names."""

    PENDING_PAYMENT = "PendingPayment"
    PAYMENT_FAILED = "PaymentFailed"
    PAID = "Paid"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class OrderStatus:
    """An order status; ``detail`` holds the failure reason or tracking id."""

    kind: StatusKind
    detail: str = ""

    PENDING_PAYMENT: ClassVar[OrderStatus]
    PAID: ClassVar[OrderStatus]
    DELIVERED: ClassVar[OrderStatus]
    CANCELLED: ClassVar[OrderStatus]

    @classmethod
    def parse(cls, status: str) -> OrderStatus:
        """Build a status from its stored name; details come back empty."""
        try:
            return cls(StatusKind(status))
        except ValueError:
            raise ValueError(f"Invalid order status: {status}") from None

    @classmethod
    def payment_failed(cls, reason: str) -> OrderStatus:
        return cls(StatusKind.PAYMENT_FAILED, reason)

    @classmethod
    def shipped(cls, tracking_id: str) -> OrderStatus:
        return cls(StatusKind.SHIPPED, tracking_id)

    def as_str(self) -> str:
        return self.kind.value

    def debug_name(self) -> str:
        """A descriptive rendering that includes any details."""
        quoted = '"' + self.detail.replace("\\", "\\\\").replace('"', '\\"') + '"'
        if self.kind is StatusKind.PAYMENT_FAILED:
            return f"{self.kind.value}({quoted})"
        if self.kind is StatusKind.SHIPPED:
            return f"{self.kind.value} {{ tracking_id: {quoted} }}"
        return self.kind.value

    def can_add_product(self) -> bool:
        return self.kind is StatusKind.PENDING_PAYMENT

    def can_cancel(self) -> bool:
        return self.kind in (StatusKind.PENDING_PAYMENT, StatusKind.PAID)

    def __str__(self) -> str:
        return self.as_str()


OrderStatus.PENDING_PAYMENT = OrderStatus(StatusKind.PENDING_PAYMENT)
OrderStatus.PAID = OrderStatus(StatusKind.PAID)
OrderStatus.DELIVERED = OrderStatus(StatusKind.DELIVERED)
OrderStatus.CANCELLED = OrderStatus(StatusKind.CANCELLED)