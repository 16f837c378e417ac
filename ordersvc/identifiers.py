"""Value-object identifiers for customers, orders and products."""

from __future__ import annotations

import uuid
from dataclasses import dataclass


def _new_uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, order=True)
class _Identifier:
    """An opaque string identifier compared and hashed by value."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} value must be a str, "
                f"not {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class CustomerId(_Identifier):
    """Identifies a customer."""

    @classmethod
    def generate(cls) -> CustomerId:
        """Return a new customer identifier holding a random UUID4."""
        return cls(_new_uuid())


@dataclass(frozen=True, order=True)
class OrderId(_Identifier):
    """Identifies an order."""

    @classmethod
    def generate(cls) -> OrderId:
        """Return a new order identifier holding a random UUID4."""
        return cls(_new_uuid())


@dataclass(frozen=True, order=True)
class ProductId(_Identifier):
    """Identifies a product line within an order."""

    @classmethod
    def generate(cls) -> ProductId:
        """Return a new product identifier holding a random UUID4."""
        return cls(_new_uuid())