"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Entity / value object invariant violations
- NotFoundError: Entity missing from a repository
- EventDispatchError: One or more event handlers failed (isolate policy)

Usage:
    from src.core.errors import ValidationError, NotFoundError
    from src.core.enums import ErrorCode

    raise ValidationError(
        "Name is required",
        code=ErrorCode.INVALID_CUSTOMER,
        field="name",
    )
"""

from typing import Any

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError


class ValidationError(DomainError, ValueError):
    """Invariant violation at construction or mutation time.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.field = field


class NotFoundError(DomainError, LookupError):
    """Entity not found in a repository.

    Raised by repository adapters instead of leaking the storage
    library's own "no result" exception.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message (e.g. "Order not found").
        resource_type: Type of resource (Customer, Product, Order).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    def __init__(
        self,
        message: str,
        *,
        resource_type: str,
        resource_id: str,
        code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class EventDispatchError(DomainError, RuntimeError):
    """One or more handlers failed during a single notification.

    Only raised under HandlerFailurePolicy.ISOLATE, after every handler
    for the event has been invoked.

    Attributes:
        event_name: Type tag of the event being dispatched.
        failures: (handler, exception) pairs in invocation order.
    """

    def __init__(
        self,
        event_name: str,
        failures: list[tuple[Any, Exception]],
    ) -> None:
        super().__init__(
            f"{len(failures)} handler(s) failed for {event_name}",
            code=ErrorCode.EVENT_HANDLER_FAILED,
            details={"event_name": event_name, "failure_count": len(failures)},
        )
        self.event_name = event_name
        self.failures = failures
