"""Base domain error class.

DomainError is the base class for ALL application errors. Entities and
value objects raise them synchronously (fail fast); application handlers
translate them into Failure results at the use-case boundary.

Architecture:
- Base class for all error types (validation, not found, dispatch)
- Inherits from Exception (raised, not returned, inside the domain)
- Subclasses also inherit the matching builtin (ValueError, LookupError)
  so generic ``except ValueError`` callers keep working

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from typing import Any

from src.core.enums import ErrorCode


class DomainError(Exception):
    """Base domain error.

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code.
            details: Optional context for debugging.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message
