"""Product domain events."""

from dataclasses import dataclass
from typing import NotRequired, TypedDict

from src.domain.events.base_event import DomainEvent


class ProductCreatedData(TypedDict):
    """Payload of ProductCreatedEvent."""

    id: NotRequired[str]
    name: str
    description: NotRequired[str]
    price: float


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductCreatedEvent(DomainEvent[ProductCreatedData]):
    """Product was created.

    Example:
        >>> event = ProductCreatedEvent(
        ...     event_data={
        ...         "name": "Product 1",
        ...         "description": "Product 1 description",
        ...         "price": 10.0,
        ...     }
        ... )
    """
