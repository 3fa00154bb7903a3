"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopdomain.email import Email
from shopdomain.ids import CustomerID


@dataclass(eq=False)
class Customer:
    """A shop customer, identified by its ID."""

    id: CustomerID
    email: Email
    name: str
    created_at: datetime = field(init=False)
    updated_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        self.created_at = self.updated_at = datetime.now(timezone.utc)

    def update_email(self, email: Email) -> None:
        """Replace the e-mail address and touch the update timestamp."""
        self.email = email
        self.updated_at = datetime.now(timezone.utc)

    def update_name(self, name: str) -> None:
        """Replace the name and touch the update timestamp."""
        self.name = name
        self.updated_at = datetime.now(timezone.utc)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Customer):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("customer", str(self.id)))