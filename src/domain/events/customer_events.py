"""Customer domain events.

Events emitted by application code around the Customer aggregate.

Events:
    - CustomerCreatedEvent: A new customer was persisted.
    - CustomerAddressChangedEvent: A customer's address was replaced.
"""

from dataclasses import dataclass
from typing import TypedDict

from src.domain.events.base_event import DomainEvent


class CustomerCreatedData(TypedDict):
    """Payload of CustomerCreatedEvent."""

    id: str
    name: str


class AddressData(TypedDict):
    """Flat address breakdown carried in event payloads."""

    street: str
    number: int
    zipcode: str
    city: str


class CustomerAddressChangedData(TypedDict):
    """Payload of CustomerAddressChangedEvent."""

    id: str
    name: str
    address: AddressData


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerCreatedEvent(DomainEvent[CustomerCreatedData]):
    """Customer was created.

    Example:
        >>> event = CustomerCreatedEvent(event_data={"id": "123", "name": "Customer 1"})
    """


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerAddressChangedEvent(DomainEvent[CustomerAddressChangedData]):
    """Customer address was changed.

    Example:
        >>> event = CustomerAddressChangedEvent(
        ...     event_data={
        ...         "id": "123",
        ...         "name": "Customer 1",
        ...         "address": {
        ...             "street": "Street 1",
        ...             "number": 1,
        ...             "zipcode": "Zipcode 1",
        ...             "city": "City 1",
        ...         },
        ...     }
        ... )
    """
