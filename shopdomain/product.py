"""Product entity with stock keeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopdomain.ids import ProductID
from shopdomain.money import Money


@dataclass(eq=False)
class Product:
    """A product for sale, identified by its ID."""

    id: ProductID
    name: str
    description: str
    price: Money
    stock: int
    created_at: datetime = field(init=False)
    updated_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        if self.name == "":
            raise ValueError("product name cannot be empty")
        if self.stock < 0:
            raise ValueError("product stock cannot be negative")
        self.created_at = self.updated_at = datetime.now(timezone.utc)

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def update_price(self, price: Money) -> None:
        self.price = price
        self._touch()

    def update_stock(self, stock: int) -> None:
        """Set the stock level; raise ValueError if negative."""
        if stock < 0:
            raise ValueError("stock cannot be negative")
        self.stock = stock
        self._touch()

    def add_stock(self, amount: int) -> None:
        """Increase the stock level; raise ValueError if amount is negative."""
        if amount < 0:
            raise ValueError("amount to add cannot be negative")
        self.stock += amount
        self._touch()

    def reserve_stock(self, amount: int) -> None:
        """Take amount out of stock for an order; raise ValueError if not possible."""
        if amount < 0:
            raise ValueError("amount to reserve cannot be negative")
        if self.stock < amount:
            raise ValueError(
                f"insufficient stock: available {self.stock}, requested {amount}"
            )
        self.stock -= amount
        self._touch()

    def is_in_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def is_available(self) -> bool:
        return self.stock > 0

    def update_details(self, name: str, description: str) -> None:
        """Set name and description; raise ValueError if the name is empty."""
        if name == "":
            raise ValueError("product name cannot be empty")
        self.name = name
        self.description = description
        self._touch()

    def update_name(self, name: str) -> None:
        """Set the name; an empty name leaves the product unchanged."""
        if name != "":
            self.name = name
            self._touch()

    def update_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def __eq__(self, other: object) -> bool:
        return self.id == other.id if isinstance(other, Product) else NotImplemented

    def __hash__(self) -> int:
        return hash(("product", str(self.id)))