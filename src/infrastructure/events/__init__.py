"""Infrastructure event implementations.

This module exports the in-memory event dispatcher. Handlers live in
``src.infrastructure.events.handlers``.

Event Dispatcher:
    - EventDispatcher: Synchronous, ordered, in-process fan-out

Usage:
    >>> from src.infrastructure.events import EventDispatcher
    >>> from src.infrastructure.events.handlers import LogWhenCustomerIsCreatedHandler
    >>>
    >>> dispatcher = EventDispatcher(logger=logger)
    >>> dispatcher.register(
    ...     "CustomerCreatedEvent", LogWhenCustomerIsCreatedHandler(logger=logger)
    ... )
"""

from src.infrastructure.events.event_dispatcher import (
    EventDispatcher,
    HandlerRegistryView,
)

__all__ = [
    "EventDispatcher",
    "HandlerRegistryView",
]
