"""Customer commands (CQRS write operations).

Commands represent user intent to change customer state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass

from src.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Register a new customer.

    Emits CustomerCreatedEvent once the customer is persisted.

    Attributes:
        name: Customer display name.
        address: Optional initial address.
        customer_id: Optional identifier. Generated (UUID v7) if omitted.

    Example:
        >>> command = CreateCustomer(name="Customer 1")
        >>> result = await handler.handle(command)
    """

    name: str
    address: Address | None = None
    customer_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangeCustomerAddress:
    """Replace a customer's address.

    Emits CustomerAddressChangedEvent once the change is persisted.

    Attributes:
        customer_id: Customer to update.
        address: New address.

    Example:
        >>> command = ChangeCustomerAddress(
        ...     customer_id="123",
        ...     address=Address("Street 1", 1, "Zipcode 1", "City 1"),
        ... )
        >>> result = await handler.handle(command)
    """

    customer_id: str
    address: Address
