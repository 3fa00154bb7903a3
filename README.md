# shopdomain

The domain layer of a small online shop, in plain Python. It has no
dependencies and does no I/O of its own.

## Contents

| Module | What it holds |
| --- | --- |
| `shopdomain.errors` | `DomainError` and the helpers `customer_not_found_error`, `customer_already_exists_error`, `invalid_input_error`, `repository_error` |
| `shopdomain.email` | `Email` |
| `shopdomain.ids` | `CustomerID`, `ProductID`, `OrderID`, `new_*_id` and `generate_*_id` |
| `shopdomain.money` | `Money` |
| `shopdomain.customer` | `Customer` |
| `shopdomain.product` | `Product` |
| `shopdomain.order` | `Order`, `OrderItem`, `OrderStatus` |
| `shopdomain.repositories` | `CustomerRepository`, `OrderRepository`, `ProductRepository` (abstract) |
| `shopdomain.create_customer` | `CreateCustomerCommand`, `CreateCustomerUseCase` |
| `shopdomain.customers` | get, list, update and delete customer use cases |
| `shopdomain.products` | create, get, list, update and delete product use cases |
| `shopdomain.orders` | create, get, list and status-update order use cases |

## Installation

```
pip install .
```

Add `.[test]` to the command to get the test dependencies as well.

## Value objects

```python
from shopdomain.email import Email
from shopdomain.money import Money

email = Email.parse("  Alice@Example.com ")
str(email)            # "alice@example.com"
email.domain()        # "example.com"
email.local_part()    # "alice"

price = Money.from_float(29.99)   # 2999 cents
price.multiply(2)                 # Money(cents=5998)
str(price)                        # "$29.99"
```

- `Email.parse` trims the address and lowers its case. It raises `ValueError`
  for an empty or malformed address. `Email()` is the empty address.
- `Money` holds whole cents. It raises `ValueError` for a negative amount,
  from `subtract` (or `-`) when the result would be below zero, and from
  `multiply` for a negative factor. Rounding is to the nearest cent, halves
  away from zero. Amounts can be added with `+` and compared with `<`, `>`
  and the like.
- `new_customer_id`, `new_product_id` and `new_order_id` raise `ValueError`
  for a blank identifier; the `generate_*_id` functions return a random
  version 4 UUID string.

## Entities

`Customer`, `Product` and `Order` compare equal when their IDs are equal, and
keep `created_at` and `updated_at` timestamps in UTC. Their own rules are
enforced with `ValueError`: a product needs a name and a non-negative stock,
`Product.reserve_stock` refuses more than is in stock, and an order needs at
least one item.

An order starts as `pending`. From there it can move forward only:

```
pending → confirmed → shipped → delivered
```

Any order can be cancelled unless it has already been delivered or
cancelled. `Order.update_status` applies these rules and raises `ValueError`
when a transition is not allowed or the status is unknown.

## Use cases

Each use case takes its repositories when it is created and has an `execute`
method that takes a command object. The repositories are abstract base
classes; you supply the storage. A minimal in-memory customer repository:

```python
from shopdomain.repositories import CustomerRepository


class InMemoryCustomers(CustomerRepository):
    def __init__(self):
        self._by_id = {}

    def save(self, customer):
        self._by_id[customer.id] = customer

    def find_by_id(self, customer_id):
        return self._by_id.get(customer_id)

    def find_by_email(self, email):
        return next((c for c in self._by_id.values() if c.email == email), None)

    def delete(self, customer_id):
        self._by_id.pop(customer_id, None)

    def exists(self, customer_id):
        return customer_id in self._by_id

    def list_with_limit(self, limit):
        customers = list(self._by_id.values())
        return customers if limit is None else customers[:limit]
```

```python
from shopdomain.create_customer import CreateCustomerCommand, CreateCustomerUseCase
from shopdomain.errors import DomainError

use_case = CreateCustomerUseCase(InMemoryCustomers())
try:
    customer = use_case.execute(
        CreateCustomerCommand(name="Alice", email="alice@example.com")
    )
except DomainError as err:
    print(err.code, err.message)
```

Failures are mostly raised as `DomainError`, whose `code` is one of
`CUSTOMER_NOT_FOUND`, `CUSTOMER_ALREADY_EXISTS`, `INVALID_INPUT`,
`REPOSITORY_ERROR`, `PRODUCT_NOT_FOUND`, `INSUFFICIENT_STOCK`,
`STOCK_RESERVATION_FAILED` or `ORDER_NOT_FOUND`. A few paths do not wrap:
`UpdateCustomerUseCase` raises `ValueError` for a malformed address, and
errors from a repository's `find_by_id`, `delete` (and, in
`UpdateCustomerUseCase`, `save`) in the get, update and delete use cases
pass through unchanged.

`CreateOrderUseCase` works in this order:

1. It checks that the customer exists.
2. It checks that every product exists and has enough stock, and builds the
   order items at the products' current prices.
3. It reserves the stock and saves each product.
4. It saves the order.

The list use cases treat a limit of zero or less, or above 1000, as 100.
`ListOrdersUseCase` lists one customer's orders; without a `customer_id` it
returns an empty list.

## What it does not do

The package has no storage of its own, no HTTP API and no command-line
program. Persisting customers, products and orders, and exposing the use
cases over a network, is left to code that implements the repository
interfaces and calls the use cases.

## Running the tests

```
pytest
```