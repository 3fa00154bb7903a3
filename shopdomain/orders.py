"""Use cases for placing, reading, listing and progressing orders."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from shopdomain.errors import (
    ERR_CODE_CUSTOMER_NOT_FOUND,
    DomainError,
    invalid_input_error,
    repository_error,
)
from shopdomain.ids import CustomerID, OrderID, ProductID, generate_order_id
from shopdomain.order import Order, OrderItem
from shopdomain.repositories import CustomerRepository, OrderRepository, ProductRepository

ERR_CODE_PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
ERR_CODE_INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
ERR_CODE_STOCK_RESERVATION_FAILED = "STOCK_RESERVATION_FAILED"
ERR_CODE_ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

_DEFAULT_LIMIT = 100
_MAX_LIMIT = 1000


def _effective_limit(limit: int) -> int:
    return _DEFAULT_LIMIT if limit <= 0 or limit > _MAX_LIMIT else limit


def _order_not_found() -> DomainError:
    return DomainError(ERR_CODE_ORDER_NOT_FOUND, "Order not found")


@dataclass(frozen=True)
class CreateOrderItemCommand:
    """One line of an order to place."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderCommand:
    """Input for placing an order."""

    customer_id: str
    items: Sequence[CreateOrderItemCommand] = field(default_factory=tuple)


class CreateOrderUseCase:
    """Places orders, checking customers and stock and reserving the goods."""

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._orders = order_repo
        self._customers = customer_repo
        self._products = product_repo

    def _build_item(self, line: CreateOrderItemCommand) -> OrderItem:
        product_id = ProductID(line.product_id)
        try:
            product = self._products.find_by_id(product_id)
        except Exception as exc:
            raise repository_error("failed to find product", exc) from exc
        if product is None:
            raise DomainError(
                ERR_CODE_PRODUCT_NOT_FOUND, f"Product not found: {line.product_id}"
            )
        if not product.is_in_stock(line.quantity):
            raise DomainError(
                ERR_CODE_INSUFFICIENT_STOCK,
                f"Insufficient stock for product: {line.product_id}",
            )
        try:
            return OrderItem(product_id, line.quantity, product.price)
        except ValueError as exc:
            raise invalid_input_error(f"invalid order item: {exc}") from exc

    def _reserve(self, line: CreateOrderItemCommand) -> None:
        product_id = ProductID(line.product_id)
        try:
            product = self._products.find_by_id(product_id)
        except Exception:
            product = None
        if product is None:
            raise DomainError(
                ERR_CODE_STOCK_RESERVATION_FAILED,
                f"Failed to reserve stock: product {line.product_id} not available",
            )
        try:
            product.reserve_stock(line.quantity)
        except ValueError as exc:
            raise DomainError(
                ERR_CODE_STOCK_RESERVATION_FAILED, f"Failed to reserve stock: {exc}"
            ) from exc
        try:
            self._products.save(product)
        except Exception as exc:
            raise repository_error("failed to update product stock", exc) from exc

    def execute(self, command: CreateOrderCommand) -> Order:
        """Place the order; raise DomainError on any failure."""
        customer_id = CustomerID(command.customer_id)
        try:
            customer_exists = self._customers.exists(customer_id)
        except Exception as exc:
            raise repository_error("failed to check customer existence", exc) from exc
        if not customer_exists:
            raise DomainError(ERR_CODE_CUSTOMER_NOT_FOUND, "Customer not found")

        items = [self._build_item(line) for line in command.items]

        try:
            order = Order(generate_order_id(), customer_id, items)
        except ValueError as exc:
            raise invalid_input_error(f"failed to create order: {exc}") from exc

        for line in command.items:
            self._reserve(line)

        try:
            self._orders.save(order)
        except Exception as exc:
            raise repository_error("failed to save order", exc) from exc
        return order


@dataclass(frozen=True)
class GetOrderCommand:
    """Input for looking up an order."""

    order_id: str


class GetOrderUseCase:
    """Looks up an order by ID."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._orders = order_repo

    def execute(self, command: GetOrderCommand) -> Order:
        order = self._orders.find_by_id(OrderID(command.order_id))
        if order is None:
            raise _order_not_found()
        return order


@dataclass(frozen=True)
class ListOrdersCommand:
    """Input for listing orders; out-of-range limits fall back to 100."""

    customer_id: str | None = None
    limit: int = 0


class ListOrdersUseCase:
    """Lists a customer's orders; without a customer the list is empty."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._orders = order_repo

    def execute(self, command: ListOrdersCommand) -> list[Order]:
        limit = _effective_limit(command.limit)
        if not command.customer_id:
            return []
        try:
            orders, _ = self._orders.find_by_customer_id(
                CustomerID(command.customer_id), limit, None
            )
        except Exception as exc:
            raise repository_error("failed to list orders by customer", exc) from exc
        return orders


@dataclass(frozen=True)
class UpdateOrderStatusCommand:
    """Input for moving an order to a new status."""

    order_id: str
    status: str


class UpdateOrderStatusUseCase:
    """Moves an order through its life cycle."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._orders = order_repo

    def execute(self, command: UpdateOrderStatusCommand) -> Order:
        order = self._orders.find_by_id(OrderID(command.order_id))
        if order is None:
            raise _order_not_found()

        try:
            order.update_status(command.status)
        except ValueError as exc:
            raise invalid_input_error(f"invalid status transition: {exc}") from exc

        try:
            self._orders.save(order)
        except Exception as exc:
            raise repository_error("failed to update order", exc) from exc
        return order