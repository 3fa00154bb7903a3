"""Persistence interfaces for customers, orders and products."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopdomain.customer import Customer
from shopdomain.email import Email
from shopdomain.ids import CustomerID, OrderID, ProductID
from shopdomain.order import Order, OrderStatus
from shopdomain.product import Product

Page = tuple  # (items, last_key) pairs returned by paginated queries


class CustomerRepository(ABC):
    """Storage of customers."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Create or update a customer."""

    @abstractmethod
    def find_by_id(self, customer_id: CustomerID) -> Customer | None:
        """The customer with the given ID, or None."""

    @abstractmethod
    def find_by_email(self, email: Email) -> Customer | None:
        """The customer with the given e-mail address, or None."""

    @abstractmethod
    def delete(self, customer_id: CustomerID) -> None:
        """Remove the customer with the given ID."""

    @abstractmethod
    def exists(self, customer_id: CustomerID) -> bool:
        """Whether a customer with the given ID is stored."""

    @abstractmethod
    def list_with_limit(self, limit: int | None) -> list[Customer]:
        """Up to limit customers; all of them when limit is None."""


class OrderRepository(ABC):
    """Storage of orders."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Create or update an order."""

    @abstractmethod
    def find_by_id(self, order_id: OrderID) -> Order | None:
        """The order with the given ID, or None."""

    @abstractmethod
    def find_by_customer_id(
        self, customer_id: CustomerID, limit: int, last_key: str | None
    ) -> tuple[list[Order], str | None]:
        """A page of a customer's orders and the key to continue from."""

    @abstractmethod
    def find_by_status(
        self, status: OrderStatus, limit: int, last_key: str | None
    ) -> tuple[list[Order], str | None]:
        """A page of orders with the given status and the key to continue from."""

    @abstractmethod
    def find_by_customer_and_status(
        self,
        customer_id: CustomerID,
        status: OrderStatus,
        limit: int,
        last_key: str | None,
    ) -> tuple[list[Order], str | None]:
        """A page of a customer's orders with the given status and the next key."""

    @abstractmethod
    def delete(self, order_id: OrderID) -> None:
        """Remove the order with the given ID."""

    @abstractmethod
    def exists(self, order_id: OrderID) -> bool:
        """Whether an order with the given ID is stored."""


class ProductRepository(ABC):
    """Storage of products."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Create or update a product."""

    @abstractmethod
    def find_by_id(self, product_id: ProductID) -> Product | None:
        """The product with the given ID, or None."""

    @abstractmethod
    def find_all(
        self, limit: int, last_key: str | None
    ) -> tuple[list[Product], str | None]:
        """A page of all products and the key to continue from."""

    @abstractmethod
    def find_in_stock(
        self, limit: int, last_key: str | None
    ) -> tuple[list[Product], str | None]:
        """A page of products currently in stock and the key to continue from."""

    @abstractmethod
    def delete(self, product_id: ProductID) -> None:
        """Remove the product with the given ID."""

    @abstractmethod
    def exists(self, product_id: ProductID) -> bool:
        """Whether a product with the given ID is stored."""