import time
from datetime import datetime, timezone

import pytest

from shopdomain.customer import Customer
from shopdomain.email import Email
from shopdomain.ids import new_customer_id

CUSTOMER_ID = new_customer_id("customer-123")
EMAIL = Email.parse("test@example.com")


def test_create_new_customer():
    before = datetime.now(timezone.utc)
    customer = Customer(CUSTOMER_ID, EMAIL, "John Doe")

    assert (customer.id, customer.email, customer.name) == (CUSTOMER_ID, EMAIL, "John Doe")
    assert customer.created_at >= before
    assert customer.created_at == customer.updated_at


@pytest.mark.parametrize(
    "method, attribute, new_value",
    [
        ("update_email", "email", Email.parse("newemail@example.com")),
        ("update_name", "name", "Jane Doe"),
    ],
)
def test_update_touches_timestamp(method, attribute, new_value):
    customer = Customer(CUSTOMER_ID, EMAIL, "John Doe")
    original = customer.updated_at
    time.sleep(0.02)

    getattr(customer, method)(new_value)

    assert getattr(customer, attribute) == new_value
    assert customer.updated_at > original
    assert customer.created_at == original


def test_customer_identity():
    customer = Customer(CUSTOMER_ID, EMAIL, "John Doe")
    same_id = Customer(CUSTOMER_ID, EMAIL, "Different Name")
    other_id = Customer(new_customer_id("customer-456"), EMAIL, "John Doe")

    assert customer == same_id
    assert not customer == other_id
    assert not customer == None  # noqa: E711
    assert len({customer, same_id, other_id}) == 2