import pytest

from shopdomain.customer import Customer
from shopdomain.email import Email
from shopdomain.errors import (
    ERR_CODE_CUSTOMER_NOT_FOUND,
    ERR_CODE_INVALID_INPUT,
    DomainError,
)
from shopdomain.ids import CustomerID, ProductID
from shopdomain.money import Money
from shopdomain.order import OrderStatus
from shopdomain.orders import (
    CreateOrderCommand,
    CreateOrderItemCommand,
    CreateOrderUseCase,
    GetOrderCommand,
    GetOrderUseCase,
    ListOrdersCommand,
    ListOrdersUseCase,
    UpdateOrderStatusCommand,
    UpdateOrderStatusUseCase,
)
from shopdomain.product import Product
from shopdomain.repositories import CustomerRepository, OrderRepository, ProductRepository


class Customers(CustomerRepository):
    def __init__(self):
        self.items = {}

    def save(self, customer):
        self.items[str(customer.id)] = customer

    def find_by_id(self, customer_id):
        return self.items.get(str(customer_id))

    def find_by_email(self, email):
        return next((c for c in self.items.values() if c.email == email), None)

    def delete(self, customer_id):
        del self.items[str(customer_id)]

    def exists(self, customer_id):
        return str(customer_id) in self.items

    def list_with_limit(self, limit):
        return list(self.items.values())[:limit]


class Products(ProductRepository):
    def __init__(self):
        self.items = {}

    def save(self, product):
        self.items[str(product.id)] = product

    def find_by_id(self, product_id):
        return self.items.get(str(product_id))

    def find_all(self, limit, last_key):
        return list(self.items.values())[:limit], None

    def find_in_stock(self, limit, last_key):
        return [p for p in self.items.values() if p.is_available()][:limit], None

    def delete(self, product_id):
        del self.items[str(product_id)]

    def exists(self, product_id):
        return str(product_id) in self.items


class Orders(OrderRepository):
    def __init__(self):
        self.items = {}
        self.requested_limits = []

    def save(self, order):
        self.items[str(order.id)] = order

    def find_by_id(self, order_id):
        return self.items.get(str(order_id))

    def find_by_customer_id(self, customer_id, limit, last_key):
        self.requested_limits.append(limit)
        found = [o for o in self.items.values() if o.customer_id == customer_id]
        return found[:limit], None

    def find_by_status(self, status, limit, last_key):
        return [o for o in self.items.values() if o.status is status][:limit], None

    def find_by_customer_and_status(self, customer_id, status, limit, last_key):
        found = [
            o for o in self.items.values()
            if o.customer_id == customer_id and o.status is status
        ]
        return found[:limit], None

    def delete(self, order_id):
        del self.items[str(order_id)]

    def exists(self, order_id):
        return str(order_id) in self.items


class Shop:
    def __init__(self):
        self.customers = Customers()
        self.products = Products()
        self.orders = Orders()
        self.create = CreateOrderUseCase(self.orders, self.customers, self.products)

    def add_customer(self, customer_id="customer-1"):
        self.customers.save(
            Customer(CustomerID(customer_id), Email.parse("john.doe@example.com"), "John Doe")
        )
        return customer_id

    def add_product(self, product_id, price, stock):
        self.products.save(
            Product(ProductID(product_id), "Test Product", "A test product", Money(price), stock)
        )
        return product_id

    def order(self, customer_id, product_id, quantity):
        return self.create.execute(
            CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, quantity)])
        )


@pytest.fixture
def shop():
    return Shop()


def test_happy_path(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 2999, 10)

    order = shop.order(customer_id, product_id, 2)

    assert order.customer_id == customer_id
    items = order.items()
    assert len(items) == 1
    assert items[0].product_id == product_id
    assert items[0].quantity == 2
    assert items[0].unit_price.cents == 2999
    assert items[0].total_price().cents == 5998
    assert order.total.cents == 5998
    assert order.status is OrderStatus.PENDING
    assert shop.products.items[product_id].stock == 8

    update = UpdateOrderStatusUseCase(shop.orders)
    confirmed = update.execute(UpdateOrderStatusCommand(str(order.id), "confirmed"))
    assert confirmed.status is OrderStatus.CONFIRMED
    assert confirmed.updated_at >= confirmed.created_at

    shipped = update.execute(UpdateOrderStatusCommand(str(order.id), "shipped"))
    assert shipped.status is OrderStatus.SHIPPED

    fetched = GetOrderUseCase(shop.orders).execute(GetOrderCommand(str(order.id)))
    assert fetched.status is OrderStatus.SHIPPED
    assert fetched.total.cents == 5998


def test_insufficient_stock(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 1500, 3)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)

    with pytest.raises(DomainError) as info:
        use_case.execute(
            CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, 5)])
        )

    assert info.value.code == "INSUFFICIENT_STOCK"
    assert "stock" in str(info.value)
    assert shop.products.items[product_id].stock == 3
    assert shop.orders.items == {}


def test_invalid_customer(shop):
    product_id = shop.add_product("product-1", 1000, 10)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)

    with pytest.raises(DomainError) as info:
        use_case.execute(
            CreateOrderCommand(
                "non-existent-customer-id", [CreateOrderItemCommand(product_id, 1)]
            )
        )

    assert info.value.code == ERR_CODE_CUSTOMER_NOT_FOUND
    assert "Customer" in str(info.value)
    assert shop.products.items[product_id].stock == 10


def test_repeated_orders_do_not_oversell(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 2000, 5)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)
    command = CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, 3)])

    successes = 0
    failure_codes = []
    for _ in range(3):
        try:
            use_case.execute(command)
            successes += 1
        except DomainError as err:
            failure_codes.append(err.code)

    assert successes == 1
    assert failure_codes == ["INSUFFICIENT_STOCK", "INSUFFICIENT_STOCK"]
    assert shop.products.items[product_id].stock == 5 - successes * 3


def test_unknown_product(shop):
    customer_id = shop.add_customer()
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)
    with pytest.raises(DomainError) as info:
        use_case.execute(
            CreateOrderCommand(customer_id, [CreateOrderItemCommand("missing-product", 1)])
        )
    assert info.value.code == "PRODUCT_NOT_FOUND"
    assert info.value.message == "Product not found: missing-product"


def test_order_without_items(shop):
    customer_id = shop.add_customer()
    with pytest.raises(DomainError) as info:
        shop.create.execute(CreateOrderCommand(customer_id, []))
    assert info.value.code == ERR_CODE_INVALID_INPUT
    assert info.value.message == "failed to create order: order must have at least one item"


def test_zero_quantity_is_invalid_item(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 1000, 10)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)
    with pytest.raises(DomainError) as info:
        use_case.execute(
            CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, 0)])
        )
    assert info.value.code == ERR_CODE_INVALID_INPUT
    assert info.value.message == "invalid order item: quantity must be positive"


def test_free_product_is_invalid_item(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 0, 10)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)
    with pytest.raises(DomainError) as info:
        use_case.execute(
            CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, 1)])
        )
    assert info.value.message == "invalid order item: unit price must be positive"


def test_order_is_saved(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 2999, 10)
    use_case = CreateOrderUseCase(shop.orders, shop.customers, shop.products)
    order = use_case.execute(
        CreateOrderCommand(customer_id, [CreateOrderItemCommand(product_id, 2)])
    )
    assert shop.orders.items[str(order.id)] is order


def test_get_missing_order(shop):
    with pytest.raises(DomainError) as info:
        GetOrderUseCase(shop.orders).execute(GetOrderCommand("missing-order"))
    assert info.value.code == "ORDER_NOT_FOUND"
    assert info.value.message == "Order not found"


@pytest.mark.parametrize("customer_id", [None, ""])
def test_list_orders_without_customer_is_empty(shop, customer_id):
    customer = shop.add_customer()
    shop.order(customer, shop.add_product("product-1", 2999, 10), 1)
    result = ListOrdersUseCase(shop.orders).execute(ListOrdersCommand(customer_id))
    assert result == []
    assert shop.orders.requested_limits == []


def test_list_orders_for_customer(shop):
    customer_id = shop.add_customer()
    product_id = shop.add_product("product-1", 2999, 10)
    order = shop.order(customer_id, product_id, 1)

    result = ListOrdersUseCase(shop.orders).execute(ListOrdersCommand(customer_id, 0))

    assert [o.id for o in result] == [order.id]
    assert shop.orders.requested_limits == [100]


def test_update_status_invalid_transition(shop):
    customer_id = shop.add_customer()
    order = shop.order(customer_id, shop.add_product("product-1", 2999, 10), 1)

    with pytest.raises(DomainError) as info:
        UpdateOrderStatusUseCase(shop.orders).execute(
            UpdateOrderStatusCommand(str(order.id), "shipped")
        )

    assert info.value.code == ERR_CODE_INVALID_INPUT
    assert info.value.message.startswith("invalid status transition: ")
    assert order.status is OrderStatus.PENDING


def test_update_status_unknown_status(shop):
    customer_id = shop.add_customer()
    order = shop.order(customer_id, shop.add_product("product-1", 2999, 10), 1)

    with pytest.raises(DomainError) as info:
        UpdateOrderStatusUseCase(shop.orders).execute(
            UpdateOrderStatusCommand(str(order.id), "lost")
        )

    assert info.value.message == "invalid status transition: invalid order status: lost"


def test_update_status_missing_order(shop):
    with pytest.raises(DomainError) as info:
        UpdateOrderStatusUseCase(shop.orders).execute(
            UpdateOrderStatusCommand("missing-order", "confirmed")
        )
    assert info.value.code == "ORDER_NOT_FOUND"