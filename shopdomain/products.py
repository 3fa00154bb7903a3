"""Use cases for creating, reading, listing, updating and deleting products."""

from __future__ import annotations

from dataclasses import dataclass

from shopdomain.errors import DomainError, invalid_input_error, repository_error
from shopdomain.ids import ProductID, generate_product_id
from shopdomain.money import Money
from shopdomain.product import Product
from shopdomain.repositories import ProductRepository

ERR_CODE_PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"

_DEFAULT_LIMIT = 100
_MAX_LIMIT = 1000


def _effective_limit(limit: int) -> int:
    return _DEFAULT_LIMIT if limit <= 0 or limit > _MAX_LIMIT else limit


def _product_not_found() -> DomainError:
    return DomainError(ERR_CODE_PRODUCT_NOT_FOUND, "Product not found")


def _price(cents: int) -> Money:
    try:
        return Money(cents)
    except ValueError:
        raise invalid_input_error("invalid price format") from None


@dataclass(frozen=True)
class CreateProductCommand:
    """Input for creating a product; price in cents."""

    name: str
    description: str
    price: int
    stock: int


class CreateProductUseCase:
    """Creates and stores products."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    def execute(self, command: CreateProductCommand) -> Product:
        price = _price(command.price)
        try:
            product = Product(
                generate_product_id(),
                command.name,
                command.description,
                price,
                command.stock,
            )
        except ValueError as exc:
            raise invalid_input_error(f"failed to create product: {exc}") from exc
        try:
            self._products.save(product)
        except Exception as exc:
            raise repository_error("failed to save product", exc) from exc
        return product


@dataclass(frozen=True)
class GetProductCommand:
    """Input for looking up a product."""

    product_id: str


class GetProductUseCase:
    """Looks up a product by ID."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    def execute(self, command: GetProductCommand) -> Product:
        product = self._products.find_by_id(ProductID(command.product_id))
        if product is None:
            raise _product_not_found()
        return product


@dataclass(frozen=True)
class ListProductsCommand:
    """Input for listing products; out-of-range limits fall back to 100."""

    limit: int = 0


class ListProductsUseCase:
    """Lists the first page of products."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    def execute(self, command: ListProductsCommand) -> list[Product]:
        limit = _effective_limit(command.limit)
        try:
            products, _ = self._products.find_all(limit, None)
        except Exception as exc:
            raise repository_error("failed to list products", exc) from exc
        return products


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input for updating a product; an empty name keeps the current one."""

    product_id: str
    name: str
    description: str
    price: int
    stock: int


class UpdateProductUseCase:
    """Updates a product's details, price and stock."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    def execute(self, command: UpdateProductCommand) -> Product:
        price = _price(command.price)

        product = self._products.find_by_id(ProductID(command.product_id))
        if product is None:
            raise _product_not_found()

        product.update_name(command.name)
        product.update_description(command.description)
        product.update_price(price)
        try:
            product.update_stock(command.stock)
        except ValueError as exc:
            raise invalid_input_error(f"invalid stock value: {exc}") from exc

        try:
            self._products.save(product)
        except Exception as exc:
            raise repository_error("failed to update product", exc) from exc
        return product


@dataclass(frozen=True)
class DeleteProductCommand:
    """Input for deleting a product."""

    product_id: str


class DeleteProductUseCase:
    """Deletes an existing product."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    def execute(self, command: DeleteProductCommand) -> None:
        product_id = ProductID(command.product_id)
        try:
            exists = self._products.exists(product_id)
        except Exception as exc:
            raise repository_error("failed to check product existence", exc) from exc
        if not exists:
            raise _product_not_found()
        self._products.delete(product_id)