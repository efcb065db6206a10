"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorCode, Environment, HandlerFailurePolicy
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.handler_failure_policy import HandlerFailurePolicy

__all__ = ["ErrorCode", "Environment", "HandlerFailurePolicy"]
