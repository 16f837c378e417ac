"""Rows of the order tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order import Order
from ordersvc.order_status import OrderStatus


@dataclass(frozen=True)
class OrderRecord:
    """A row of the ``orders`` table."""

    id: str
    customer_id: str
    status: str
    total_amount: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> OrderRecord:
        return cls(
            row["id"],
            row["customer_id"],
            row["status"],
            int(row["total_amount"]),
            row["created_at"],
            row["updated_at"],
        )

    def to_order(self) -> Order:
        """The order this row describes; its products are not loaded."""
        return Order(
            id=OrderId(self.id),
            customer_id=CustomerId(self.customer_id),
            status=OrderStatus.parse(self.status),
            products=[],
        )


@dataclass(frozen=True)
class OrderProductRecord:
    id: str
    order_id: str
    product_id: str
    quantity: int
    unit_price: int