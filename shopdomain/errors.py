"""Domain errors raised by entities, value objects and use cases."""

from __future__ import annotations

ERR_CODE_CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
ERR_CODE_CUSTOMER_ALREADY_EXISTS = "CUSTOMER_ALREADY_EXISTS"
ERR_CODE_INVALID_INPUT = "INVALID_INPUT"
ERR_CODE_REPOSITORY_ERROR = "REPOSITORY_ERROR"


class DomainError(Exception):
    """An error with a machine-readable code, a message and an optional cause."""

    def __init__(self, code: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.code}: {self.message} (caused by: {self.cause})"
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"DomainError(code={self.code!r}, message={self.message!r}, cause={self.cause!r})"


def customer_not_found_error(customer_id: str) -> DomainError:
    """Error for a customer that does not exist."""
    return DomainError(
        ERR_CODE_CUSTOMER_NOT_FOUND,
        f"Customer with ID {customer_id} not found",
    )


def customer_already_exists_error(email: str) -> DomainError:
    """Error for a customer whose e-mail address is already taken."""
    return DomainError(
        ERR_CODE_CUSTOMER_ALREADY_EXISTS,
        f"Customer with email {email} already exists",
    )


def invalid_input_error(message: str) -> DomainError:
    """Error for input that fails validation."""
    return DomainError(ERR_CODE_INVALID_INPUT, message)


def repository_error(message: str, cause: BaseException | None) -> DomainError:
    """Error for a failure in the persistence layer."""
    return DomainError(ERR_CODE_REPOSITORY_ERROR, message, cause)