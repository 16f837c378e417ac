import uuid

import pytest

from ordersvc.identifiers import ProductId
from ordersvc.product import Product


def test_create_sets_fields_and_generates_id():
    product = Product.create("widget", 100, 3)
    assert product.name == "widget"
    assert product.price == 100
    assert product.quantity == 3
    assert uuid.UUID(str(product.id)).version == 4


def test_create_gives_distinct_ids():
    first = Product.create("widget", 100, 1)
    second = Product.create("widget", 100, 1)
    assert first.id != second.id
    assert first != second


def test_subtotal_multiplies_price_and_quantity():
    product = Product(ProductId("product-1"), "Product 1", 100, 2)
    assert product.subtotal() == 200


def test_subtotal_zero_quantity():
    assert Product(ProductId("p"), "p", 999, 0).subtotal() == 0


def test_equality_by_value():
    a = Product(ProductId("p"), "name", 10, 1)
    b = Product(ProductId("p"), "name", 10, 1)
    assert a == b
    assert len({a, b}) == 1


@pytest.mark.parametrize("price, quantity", [(-1, 1), (1, -1)])
def test_negative_values_rejected(price, quantity):
    with pytest.raises(ValueError):
        Product(ProductId("p"), "p", price, quantity)