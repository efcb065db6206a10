"""Base domain event class.

This module defines the foundational DomainEvent base class used by all domain
events in the system. Domain events represent "things that happened" to an
aggregate (CustomerCreated, CustomerAddressChanged, ProductCreated).

Architecture:
    - Frozen dataclass (immutable after creation)
    - ``event_data`` payload stored verbatim (validation belongs to the
      producing entity, not to the event)
    - Auto-generated event_id (UUID) for log correlation
    - occurred_at timestamp (UTC) set at construction
    - ``name`` is the string type tag the dispatcher routes on

Usage:
    >>> from dataclasses import dataclass
    >>> from typing import TypedDict
    >>>
    >>> class OrderPaidData(TypedDict):
    ...     id: str
    >>>
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class OrderPaidEvent(DomainEvent[OrderPaidData]):
    ...     pass
    >>>
    >>> event = OrderPaidEvent(event_data={"id": "o1"})
    >>> event.name
    'OrderPaidEvent'
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar
from uuid import UUID, uuid4

TData = TypeVar("TData")


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent(Generic[TData]):
    """Base class for all domain events.

    Events are created at the moment a domain action worth observing
    occurs. They are never persisted and live only for the duration of a
    single ``notify`` call.

    All domain events MUST:
        1. Inherit from this base class
        2. Be frozen dataclasses (immutable after creation)
        3. Use kw_only=True (force keyword arguments for clarity)
        4. Describe their payload shape with a TypedDict

    Attributes:
        event_data: Payload specific to the concrete event type. Stored as
            given; handlers must treat it as read-only.
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Example:
        >>> event = CustomerCreatedEvent(event_data={"id": "123", "name": "Customer 1"})
        >>> event.name
        'CustomerCreatedEvent'
        >>> # event.event_data = {}  # Raises FrozenInstanceError
    """

    event_data: TData
    """Payload specific to the concrete event type."""

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""

    @property
    def name(self) -> str:
        """Type tag used to route the event.

        Returns:
            str: Concrete event class name (e.g. "CustomerCreatedEvent").
        """
        return type(self).__name__
