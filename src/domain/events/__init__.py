"""Domain events package.

Immutable records of things that happened to an aggregate, routed by the
event dispatcher on their ``name`` type tag.

Usage:
    from src.domain.events import CustomerCreatedEvent

    event = CustomerCreatedEvent(event_data={"id": "123", "name": "Customer 1"})
    dispatcher.notify(event)
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.customer_events import (
    AddressData,
    CustomerAddressChangedData,
    CustomerAddressChangedEvent,
    CustomerCreatedData,
    CustomerCreatedEvent,
)
from src.domain.events.product_events import ProductCreatedData, ProductCreatedEvent

__all__ = [
    "DomainEvent",
    # Customer events
    "AddressData",
    "CustomerAddressChangedData",
    "CustomerAddressChangedEvent",
    "CustomerCreatedData",
    "CustomerCreatedEvent",
    # Product events
    "ProductCreatedData",
    "ProductCreatedEvent",
]
