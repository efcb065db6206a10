"""Product commands (CQRS write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Add a product to the catalog.

    Emits ProductCreatedEvent once the product is persisted.

    Attributes:
        name: Product name.
        price: Unit price (non-negative).
        description: Optional marketing description, carried on the event only.
        product_id: Optional identifier. Generated (UUID v7) if omitted.
    """

    name: str
    price: float
    description: str | None = None
    product_id: str | None = None
