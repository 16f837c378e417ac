"""The order aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field

from ordersvc.errors import InvalidStatusTransitionError
from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order_status import OrderStatus, StatusKind
from ordersvc.product import Product


@dataclass
class Order:
    """A customer's order and the products on it."""

    id: OrderId
    customer_id: CustomerId
    status: OrderStatus = OrderStatus.PENDING_PAYMENT
    products: list[Product] = field(default_factory=list)

    @classmethod
    def create(cls, customer_id: CustomerId) -> Order:
        """Start a new empty order awaiting payment."""
        return cls(OrderId.generate(), customer_id)

    def add_product(self, product: Product) -> None:
        """Append a product; only allowed while payment is pending."""
        if not self.status.can_add_product():
            raise InvalidStatusTransitionError(self.status.debug_name(), "add_product")
        self.products.append(product)

    def total_amount(self) -> int:
        return sum(product.subtotal() for product in self.products)

    def mark_as_paid(self) -> None:
        """Move a pending order to paid."""
        if self.status.kind is not StatusKind.PENDING_PAYMENT:
            raise InvalidStatusTransitionError(self.status.debug_name(), "mark_as_paid")
        self.status = OrderStatus.PAID