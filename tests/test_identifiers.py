import dataclasses
import uuid

import pytest

from ordersvc.identifiers import CustomerId, OrderId, ProductId


def test_str_returns_wrapped_value():
    assert str(CustomerId("customer-1")) == "customer-1"
    assert str(OrderId("order-1")) == "order-1"
    assert str(ProductId("product-1")) == "product-1"


def test_generate_yields_uuid4():
    customer = CustomerId.generate()
    order = OrderId.generate()
    product = ProductId.generate()
    assert type(customer) is CustomerId
    assert type(order) is OrderId
    assert type(product) is ProductId
    assert uuid.UUID(str(customer)).version == 4
    assert uuid.UUID(str(order)).version == 4
    assert uuid.UUID(str(product)).version == 4


def test_generate_is_unique():
    assert len({CustomerId.generate() for _ in range(50)}) == 50
    assert len({OrderId.generate() for _ in range(50)}) == 50
    assert len({ProductId.generate() for _ in range(50)}) == 50


def test_equality_and_hash_by_value():
    assert CustomerId("a") == CustomerId("a")
    assert OrderId("a") == OrderId("a")
    assert ProductId("a") == ProductId("a")
    assert len({CustomerId("a"), CustomerId("a"), CustomerId("b")}) == 2
    assert len({OrderId("a"), OrderId("a"), OrderId("b")}) == 2
    assert len({ProductId("a"), ProductId("a"), ProductId("b")}) == 2


def test_different_kinds_do_not_compare_equal():
    assert (OrderId("a") == ProductId("a")) is False
    assert (CustomerId("a") == OrderId("a")) is False


def test_ordering_follows_value():
    assert sorted([OrderId("b"), OrderId("c"), OrderId("a")]) == [
        OrderId("a"),
        OrderId("b"),
        OrderId("c"),
    ]
    assert sorted([CustomerId("b"), CustomerId("a")]) == [
        CustomerId("a"),
        CustomerId("b"),
    ]
    assert sorted([ProductId("z"), ProductId("y")]) == [
        ProductId("y"),
        ProductId("z"),
    ]


def test_identifier_is_immutable():
    ident = OrderId("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ident.value = "y"
    assert ident.value == "x"


def test_non_string_value_rejected():
    with pytest.raises(TypeError):
        CustomerId(42)
    with pytest.raises(TypeError):
        OrderId(42)
    with pytest.raises(TypeError):
        ProductId(None)