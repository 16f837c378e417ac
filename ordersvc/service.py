"""Use cases for creating and reading orders."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from ordersvc.errors import OrderError
from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order import Order
from ordersvc.product import Product
from ordersvc.repository import OrderRepository, OrderRepositoryError


class OrderServiceError(Exception):
    """Base class for errors raised by the order service."""


class ServiceDomainError(OrderServiceError):
    def __init__(self, error: OrderError) -> None:
        self.error = error
        super().__init__(f"Order domain error: {error}")


class ServiceRepositoryError(OrderServiceError):
    def __init__(self, error: OrderRepositoryError) -> None:
        self.error = error
        super().__init__(f"Repository error: {error}")


class ServiceOrderNotFoundError(OrderServiceError):
    def __init__(self) -> None:
        super().__init__("Order not found")


@contextmanager
def _repository_errors() -> Iterator[None]:
    try:
        yield
    except OrderRepositoryError as exc:
        raise ServiceRepositoryError(exc) from exc


class OrderService:
    def __init__(self, repository: OrderRepository) -> None:
        self.repository = repository

    def create_order(self, customer_id: CustomerId) -> Order:
        order = Order.create(customer_id)
        with _repository_errors():
            self.repository.save(order)
        return order

    def add_product_to_order(self, order_id: OrderId, product: Product) -> None:
        with _repository_errors():
            order = self.repository.find_by_id(order_id)
        if order is None:
            raise ServiceOrderNotFoundError()
        try:
            order.add_product(product)
        except OrderError as exc:
            raise ServiceDomainError(exc) from exc
        with _repository_errors():
            self.repository.save(order)

    def get_order(self, order_id: OrderId) -> Order | None:
        with _repository_errors():
            return self.repository.find_by_id(order_id)