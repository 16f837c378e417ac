"""Products placed on an order."""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.identifiers import ProductId


@dataclass(frozen=True)
class Product:
    """A product line: unit ``price`` times ``quantity``."""

    id: ProductId
    name: str
    price: int
    quantity: int

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must not be negative: {self.price}")
        if self.quantity < 0:
            raise ValueError(f"quantity must not be negative: {self.quantity}")

    @classmethod
    def create(cls, name: str, price: int, quantity: int) -> Product:
        """Build a product with a freshly generated id."""
        return cls(ProductId.generate(), name, price, quantity)

    def subtotal(self) -> int:
        return self.price * self.quantity