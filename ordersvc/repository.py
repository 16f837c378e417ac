"""Storage interface for orders and the errors it raises."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order import Order


class OrderRepositoryError(Exception):
    """A repository operation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"Repository error: {self.message}"


class RepositoryOrderNotFoundError(OrderRepositoryError):
    def __init__(self) -> None:
        super().__init__("Order not found")

    def __str__(self) -> str:
        return self.message


class OrderRepository(ABC):
    """Where orders are kept."""

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Order | None: ...

    @abstractmethod
    def save(self, order: Order) -> None: ...

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Order]: ...