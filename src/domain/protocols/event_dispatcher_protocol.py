"""Event dispatcher protocol (port) for domain events.

This module defines the EventDispatcherProtocol interface that the
application layer depends on. Infrastructure provides the adapter
(EventDispatcher in src/infrastructure/events/event_dispatcher.py).

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Registry keyed by the event's string type tag (``event.name``)
    - Synchronous fan-out in registration order
    - Explicitly instantiated and passed by reference (never a
      process-wide singleton)

Usage:
    >>> from src.core.container import create_event_dispatcher
    >>> from src.domain.events import CustomerCreatedEvent
    >>>
    >>> dispatcher = create_event_dispatcher()
    >>> dispatcher.register("CustomerCreatedEvent", handler)
    >>> dispatcher.notify(CustomerCreatedEvent(event_data={"id": "1", "name": "A"}))
"""

from collections.abc import Mapping
from typing import Protocol

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol


class EventDispatcherProtocol(Protocol):
    """Protocol for in-process publish/subscribe brokers.

    Key Requirements:
        1. **Ordered delivery**: Handlers run in registration order.
        2. **Same instance**: Every handler receives the same event object.
        3. **Unknown events are not errors**: notify() for a type with no
           handlers is a silent no-op.
        4. **Duplicates allowed**: Registering a handler twice invokes it twice.
    """

    @property
    def event_handlers(
        self,
    ) -> Mapping[str, tuple[EventHandlerProtocol[DomainEvent], ...]]:
        """Live, read-only view of event name -> ordered handlers."""
        ...

    def register(
        self, event_name: str, handler: EventHandlerProtocol[DomainEvent]
    ) -> None:
        """Append handler to the list for event_name."""
        ...

    def unregister(
        self, event_name: str, handler: EventHandlerProtocol[DomainEvent]
    ) -> None:
        """Remove handler (by identity) from the list for event_name."""
        ...

    def unregister_all(self) -> None:
        """Remove every event name and handler."""
        ...

    def notify(self, event: DomainEvent) -> None:
        """Invoke every handler registered for event.name."""
        ...
