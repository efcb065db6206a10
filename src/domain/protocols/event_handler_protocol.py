"""Event handler protocol (port).

Any object exposing ``handle(event) -> None`` for a specific event payload
shape can be registered with the event dispatcher. Handlers are matched
structurally; they do not inherit from this protocol.

Rules for implementations:
    - Handle exactly one event type
    - Observational side effects only (log, notify)
    - Never mutate the event or the entity that triggered it
    - Work that needs asynchronous I/O is scheduled by the handler itself;
      the dispatcher does not await anything
"""

from typing import Protocol, TypeVar

from src.domain.events.base_event import DomainEvent

E_contra = TypeVar("E_contra", bound=DomainEvent, contravariant=True)


class EventHandlerProtocol(Protocol[E_contra]):
    """Single-capability consumer of one domain event type.

    Example:
        >>> class PrintCustomerCreated:
        ...     def handle(self, event: CustomerCreatedEvent) -> None:
        ...         print(event.event_data["name"])
        >>>
        >>> dispatcher.register("CustomerCreatedEvent", PrintCustomerCreated())
    """

    def handle(self, event: E_contra) -> None:
        """React to a dispatched event.

        Args:
            event: The event instance passed to notify().
        """
        ...
