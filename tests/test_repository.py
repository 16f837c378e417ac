import pytest

from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order import Order
from ordersvc.repository import (
    OrderRepository,
    OrderRepositoryError,
    RepositoryOrderNotFoundError,
)


class _FindOnly(OrderRepository):
    def find_by_id(self, order_id):
        return None


class _Complete(_FindOnly):
    def __init__(self):
        self.orders = []

    def save(self, order):
        self.orders.append(order)

    def find_by_customer_id(self, customer_id):
        return [o for o in self.orders if o.customer_id == customer_id]


def test_interface_and_partial_implementation_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OrderRepository()
    with pytest.raises(TypeError, match="find_by_customer_id"):
        _FindOnly()


def test_complete_implementation_is_usable():
    repo = _Complete()
    order = Order(OrderId("order-1"), CustomerId("customer-1"))
    repo.save(order)
    assert repo.find_by_customer_id(CustomerId("customer-1")) == [order]
    assert repo.find_by_id(OrderId("order-1")) is None


def test_other_error_message():
    error = OrderRepositoryError("Failed to save order")
    assert str(error) == "Repository error: Failed to save order"
    assert error.message == "Failed to save order"


def test_not_found_error_message():
    error = RepositoryOrderNotFoundError()
    assert str(error) == "Order not found"


def test_not_found_is_a_repository_error():
    error = RepositoryOrderNotFoundError()
    assert isinstance(error, OrderRepositoryError)
    assert str(error) == "Order not found"