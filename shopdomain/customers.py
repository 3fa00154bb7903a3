"""Use cases for reading, listing, updating and deleting customers."""

from __future__ import annotations

from dataclasses import dataclass

from shopdomain.customer import Customer
from shopdomain.email import Email
from shopdomain.errors import customer_not_found_error, repository_error
from shopdomain.ids import CustomerID
from shopdomain.repositories import CustomerRepository

_DEFAULT_LIMIT = 100
_MAX_LIMIT = 1000


class _CustomerUseCase:
    """Base for use cases that work on the customer repository."""

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customers = customer_repo

    def _existing(self, customer_id: str) -> Customer:
        customer = self._customers.find_by_id(CustomerID(customer_id))
        if customer is None:
            raise customer_not_found_error(customer_id)
        return customer


@dataclass(frozen=True)
class GetCustomerCommand:
    """Input for looking up a customer."""

    customer_id: str


class GetCustomerUseCase(_CustomerUseCase):
    """Looks up a customer by ID."""

    def execute(self, command: GetCustomerCommand) -> Customer:
        """The customer; raise DomainError if there is none."""
        return self._existing(command.customer_id)


@dataclass(frozen=True)
class ListCustomersCommand:
    """Input for listing customers; out-of-range limits fall back to 100."""

    limit: int = 0


class ListCustomersUseCase(_CustomerUseCase):
    """Lists customers up to a limit."""

    def execute(self, command: ListCustomersCommand) -> list[Customer]:
        limit = command.limit if 0 < command.limit <= _MAX_LIMIT else _DEFAULT_LIMIT
        try:
            return self._customers.list_with_limit(limit)
        except Exception as exc:
            raise repository_error("failed to list customers", exc) from exc


@dataclass(frozen=True)
class UpdateCustomerCommand:
    """Input for changing a customer's name and e-mail address."""

    customer_id: str
    name: str
    email: str


class UpdateCustomerUseCase(_CustomerUseCase):
    """Changes a customer's name and e-mail address."""

    def execute(self, command: UpdateCustomerCommand) -> Customer:
        """The updated customer; ValueError for a bad address, DomainError if missing."""
        email = Email.parse(command.email)
        customer = self._existing(command.customer_id)
        customer.update_name(command.name)
        customer.update_email(email)
        self._customers.save(customer)
        return customer


@dataclass(frozen=True)
class DeleteCustomerCommand:
    """Input for deleting a customer."""

    customer_id: str


class DeleteCustomerUseCase(_CustomerUseCase):
    """Deletes an existing customer."""

    def execute(self, command: DeleteCustomerCommand) -> None:
        customer = self._existing(command.customer_id)
        self._customers.delete(customer.id)