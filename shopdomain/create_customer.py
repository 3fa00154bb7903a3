"""Use case for registering a new customer."""

from __future__ import annotations

from dataclasses import dataclass

from shopdomain.customer import Customer
from shopdomain.customers import _CustomerUseCase
from shopdomain.email import Email
from shopdomain.errors import (
    customer_already_exists_error,
    invalid_input_error,
    repository_error,
)
from shopdomain.ids import generate_customer_id


@dataclass(frozen=True)
class CreateCustomerCommand:
    """Input for registering a customer."""

    name: str
    email: str


class CreateCustomerUseCase(_CustomerUseCase):
    """Registers customers, keeping e-mail addresses unique."""

    def _email_taken(self, email: Email) -> bool:
        # A failed lookup counts as "no such customer".
        try:
            return self._customers.find_by_email(email) is not None
        except Exception:
            return False

    def execute(self, command: CreateCustomerCommand) -> Customer:
        """Create and store a customer; raise DomainError on failure."""
        try:
            email = Email.parse(command.email)
        except ValueError:
            raise invalid_input_error("invalid email format") from None

        customer = Customer(generate_customer_id(), email, command.name)

        if self._email_taken(email):
            raise customer_already_exists_error(command.email)

        try:
            self._customers.save(customer)
        except Exception as exc:
            raise repository_error("failed to save customer", exc) from exc
        return customer