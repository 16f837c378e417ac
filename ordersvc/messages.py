"""Request and response bodies of the order HTTP API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from ordersvc.order import Order


def _field(data: Any, name: str, kind: type, limit: int | None = None) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("request body must be a JSON object")
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, kind):
        expected = "a string" if kind is str else "an integer"
        raise ValueError(f"invalid type for `{name}`: expected {expected}")
    if limit is not None and not 0 <= value <= limit:
        raise ValueError(f"`{name}` out of range: {value}")
    return value


@dataclass(frozen=True)
class CreateOrderRequest:
    customer_id: str

    @classmethod
    def from_json(cls, data: Any) -> CreateOrderRequest:
        return cls(_field(data, "customer_id", str))


@dataclass(frozen=True)
class OrderProductRequest:
    product_id: str
    quantity: int
    unit_price: int

    @classmethod
    def from_json(cls, data: Any) -> OrderProductRequest:
        return cls(
            _field(data, "product_id", str),
            _field(data, "quantity", int, 2**32 - 1),
            _field(data, "unit_price", int, 2**64 - 1),
        )


@dataclass(frozen=True)
class OrderProductResponse:
    product_id: str
    quantity: int
    unit_price: int


@dataclass(frozen=True)
class OrderResponse:
    id: str
    customer_id: str
    status: str
    total_amount: int
    items: tuple[OrderProductResponse, ...]

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            str(order.id),
            str(order.customer_id),
            order.status.debug_name(),
            order.total_amount(),
            tuple(OrderProductResponse(str(p.id), p.quantity, p.price) for p in order.products),
        )

    def to_json(self) -> dict[str, Any]:
        body = asdict(self)
        body["items"] = list(body["items"])
        return body