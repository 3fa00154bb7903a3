"""Order entity, its items and its status life cycle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from shopdomain.ids import CustomerID, OrderID, ProductID
from shopdomain.money import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Where an order stands in its life cycle."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderItem:
    """A quantity of one product at a fixed unit price."""

    product_id: ProductID
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError("quantity must be positive")
        if self.unit_price.is_zero():
            raise ValueError("unit price must be positive")

    def total_price(self) -> Money:
        return self.unit_price.multiply(self.quantity)


def _checked_items(items: Iterable[OrderItem]) -> tuple[OrderItem, ...]:
    frozen = tuple(items)
    if not frozen:
        raise ValueError("order must have at least one item")
    return frozen


class Order:
    """A customer's order, identified by its ID."""

    def __init__(
        self,
        order_id: OrderID,
        customer_id: CustomerID,
        items: Iterable[OrderItem],
    ) -> None:
        checked = _checked_items(items)
        now = _now()
        self._id = order_id
        self._customer_id = customer_id
        self._items = checked
        self._status = OrderStatus.PENDING
        self._total = sum((item.total_price() for item in checked), Money())
        self._created_at = now
        self._updated_at = now

    @classmethod
    def restore(
        cls,
        order_id: OrderID,
        customer_id: CustomerID,
        items: Iterable[OrderItem],
        status: OrderStatus | str,
        total: Money,
        created_at: datetime,
        updated_at: datetime,
    ) -> Order:
        """Rebuild an order with explicit, previously stored state."""
        checked = _checked_items(items)
        order = cls.__new__(cls)
        order._id = order_id
        order._customer_id = customer_id
        order._items = checked
        order._status = OrderStatus(status)
        order._total = total
        order._created_at = created_at
        order._updated_at = updated_at
        return order

    @property
    def id(self) -> OrderID:
        return self._id

    @property
    def customer_id(self) -> CustomerID:
        return self._customer_id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total(self) -> Money:
        return self._total

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def items(self) -> list[OrderItem]:
        """A fresh list of the order's items."""
        return list(self._items)

    def _move_to(self, status: OrderStatus) -> None:
        self._status = status
        self._updated_at = _now()

    def confirm(self) -> None:
        if self._status is not OrderStatus.PENDING:
            raise ValueError(
                f"can only confirm pending orders, current status: {self._status.value}"
            )
        self._move_to(OrderStatus.CONFIRMED)

    def ship(self) -> None:
        if self._status is not OrderStatus.CONFIRMED:
            raise ValueError(
                f"can only ship confirmed orders, current status: {self._status.value}"
            )
        self._move_to(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        if self._status is not OrderStatus.SHIPPED:
            raise ValueError(
                f"can only deliver shipped orders, current status: {self._status.value}"
            )
        self._move_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        if self._status in (OrderStatus.DELIVERED, OrderStatus.CANCELLED):
            raise ValueError(f"cannot cancel order with status: {self._status.value}")
        self._move_to(OrderStatus.CANCELLED)

    def is_pending(self) -> bool:
        return self._status is OrderStatus.PENDING

    def is_confirmed(self) -> bool:
        return self._status is OrderStatus.CONFIRMED

    def is_cancelled(self) -> bool:
        return self._status is OrderStatus.CANCELLED

    def update_status(self, new_status: OrderStatus | str) -> None:
        """Move to new_status if the life cycle allows it; raise ValueError otherwise."""
        try:
            status = OrderStatus(new_status)
        except ValueError:
            raise ValueError(f"invalid order status: {new_status}") from None
        if status is OrderStatus.PENDING:
            raise ValueError("cannot change status back to pending")
        transitions = {
            OrderStatus.CONFIRMED: self.confirm,
            OrderStatus.SHIPPED: self.ship,
            OrderStatus.DELIVERED: self.deliver,
            OrderStatus.CANCELLED: self.cancel,
        }
        transitions[status]()

    def item_count(self) -> int:
        """Total quantity across all items."""
        return sum(item.quantity for item in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((Order, str(self._id)))

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"status={self._status.value!r}, total={self._total!s})"
        )