"""Result types for railway-oriented programming.

Application command handlers return a Result so callers can branch on the
outcome of a use case without catching domain exceptions themselves.

Usage:
    def activate(customer: Customer) -> Result[Customer, str]:
        try:
            customer.activate()
        except ValidationError as e:
            return Failure(error=e.message)
        return Success(value=customer)

    result = activate(customer)
    match result:
        case Success(value=customer):
            print(f"Active: {customer.id}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
