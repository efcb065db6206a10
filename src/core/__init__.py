"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming at the use-case boundary
- Base error classes for domain-level error handling
- Settings and enums

The core module has NO dependencies on other application layers.
"""

from src.core.errors import (
    DomainError,
    EventDispatchError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "EventDispatchError",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
