"""Identifier value types for customers, products and orders."""

from __future__ import annotations

import uuid
from typing import TypeVar


class _Identifier(str):
    """A string identifier; the empty string stands for no identifier."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class CustomerID(_Identifier):
    """Unique customer identifier."""

    __slots__ = ()

    def is_empty(self) -> bool:
        """Whether this identifier is the empty string."""
        return self == ""


class ProductID(_Identifier):
    """Unique product identifier."""

    __slots__ = ()

    def is_empty(self) -> bool:
        """Whether this identifier is the empty string."""
        return self == ""


class OrderID(_Identifier):
    """Unique order identifier."""

    __slots__ = ()

    def is_empty(self) -> bool:
        """Whether this identifier is the empty string."""
        return self == ""


_Id = TypeVar("_Id", bound=_Identifier)


def _validated(kind: type[_Id], label: str, value: str) -> _Id:
    if not value.strip():
        raise ValueError(f"{label} ID cannot be empty")
    return kind(value)


def _random(kind: type[_Id]) -> _Id:
    return kind(str(uuid.uuid4()))


def new_customer_id(value: str) -> CustomerID:
    """Validate and wrap a customer identifier."""
    return _validated(CustomerID, "customer", value)


def new_product_id(value: str) -> ProductID:
    """Validate and wrap a product identifier."""
    return _validated(ProductID, "product", value)


def new_order_id(value: str) -> OrderID:
    """Validate and wrap an order identifier."""
    return _validated(OrderID, "order", value)


def generate_customer_id() -> CustomerID:
    """A fresh random (version 4 UUID) customer identifier."""
    return _random(CustomerID)


def generate_product_id() -> ProductID:
    """A fresh random (version 4 UUID) product identifier."""
    return _random(ProductID)


def generate_order_id() -> OrderID:
    """A fresh random (version 4 UUID) order identifier."""
    return _random(OrderID)