"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events in the system with their metadata.
Used for:
- Container wiring (default handlers subscribed per event name)
- Validation tests (verify every event has the handlers it declares)

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Run tests - they'll tell you which handler mapping is missing
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from src.domain.events.base_event import DomainEvent
from src.domain.events.customer_events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
)
from src.domain.events.product_events import ProductCreatedEvent


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    CUSTOMER = "customer"
    PRODUCT = "product"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        description: One-line summary of what happened.
        requires_logging: A logging handler reacts to this event.
        requires_notification: A notification (console/email) handler
            reacts to this event.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    description: str
    requires_logging: bool = True
    requires_notification: bool = False

    @property
    def event_name(self) -> str:
        """Type tag the dispatcher routes on."""
        return self.event_class.__name__


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Customer events
    EventMetadata(
        event_class=CustomerCreatedEvent,
        category=EventCategory.CUSTOMER,
        description="Customer was created",
        requires_logging=True,
        requires_notification=True,
    ),
    EventMetadata(
        event_class=CustomerAddressChangedEvent,
        category=EventCategory.CUSTOMER,
        description="Customer address was changed",
        requires_logging=True,
    ),
    # Product events
    EventMetadata(
        event_class=ProductCreatedEvent,
        category=EventCategory.PRODUCT,
        description="Product was created",
        requires_logging=False,
        requires_notification=True,
    ),
]


# ═══════════════════════════════════════════════════════════════
# Computed Views (for validation and introspection)
# ═══════════════════════════════════════════════════════════════


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        List of event classes in registry.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_event_metadata(event_name: str) -> EventMetadata | None:
    """Look up registry metadata by event type name.

    Args:
        event_name: Event type tag (e.g. "CustomerCreatedEvent").

    Returns:
        Matching metadata, or None for unregistered names.
    """
    for meta in EVENT_REGISTRY:
        if meta.event_name == event_name:
            return meta
    return None


def get_events_requiring_handler(handler_type: str) -> list[type[DomainEvent]]:
    """Get events requiring specific handler.

    Args:
        handler_type: "logging" or "notification"

    Returns:
        List of event classes requiring that handler.

    Raises:
        ValueError: If handler_type is invalid.
    """
    field_map = {
        "logging": "requires_logging",
        "notification": "requires_notification",
    }

    if handler_type not in field_map:
        raise ValueError(
            f"Invalid handler_type: {handler_type}. "
            f"Must be one of: {list(field_map.keys())}"
        )

    field = field_map[handler_type]
    return [meta.event_class for meta in EVENT_REGISTRY if getattr(meta, field)]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dict with counts by category and handler requirements.
    """
    return {
        "total_events": len(EVENT_REGISTRY),
        "by_category": dict(Counter(meta.category.value for meta in EVENT_REGISTRY)),
        "requiring_logging": sum(1 for m in EVENT_REGISTRY if m.requires_logging),
        "requiring_notification": sum(
            1 for m in EVENT_REGISTRY if m.requires_notification
        ),
    }
