"""Customer domain entity.

Represents a buyer who can place orders and accumulate reward points.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Does NOT hold a reference to the event dispatcher; application code
      builds CustomerCreatedEvent / CustomerAddressChangedEvent and calls
      notify() after the change has been persisted
    - Invariants enforced at construction and on every mutation

Usage:
    from src.domain.entities import Customer
    from src.domain.value_objects import Address

    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    customer.activate()
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.errors import CustomerError
from src.domain.value_objects.address import Address


@dataclass
class Customer:
    """Customer aggregate root.

    Attributes:
        id: Unique customer identifier.
        name: Customer display name (non-empty).
        address: Postal address. Required before activation.
        active: Whether the customer is active.
        reward_points: Points accumulated from placed orders.

    Example:
        >>> customer = Customer(id="123", name="Customer 1")
        >>> customer.activate()
        Traceback (most recent call last):
        ...
        src.core.errors.common_errors.ValidationError: Address is mandatory to activate a customer
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: float = 0

    def __post_init__(self) -> None:
        """Validate customer after initialization.

        Raises:
            ValidationError: If id or name is empty, or reward points negative.
        """
        self._validate()

    def _validate(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError(
                CustomerError.ID_REQUIRED, code=ErrorCode.INVALID_CUSTOMER, field="id"
            )

        if not self.name or not self.name.strip():
            raise ValidationError(
                CustomerError.NAME_REQUIRED,
                code=ErrorCode.INVALID_CUSTOMER,
                field="name",
            )

        if self.reward_points < 0:
            raise ValidationError(
                CustomerError.INVALID_REWARD_POINTS,
                code=ErrorCode.INVALID_CUSTOMER,
                field="reward_points",
            )

    # =========================================================================
    # Mutations
    # =========================================================================

    def change_name(self, name: str) -> None:
        """Rename the customer.

        Args:
            name: New display name.

        Raises:
            ValidationError: If name is empty. The old name is kept.
        """
        previous = self.name
        self.name = name
        try:
            self._validate()
        except ValidationError:
            self.name = previous
            raise

    def change_address(self, address: Address) -> None:
        """Replace the customer's address.

        This is the trigger point for CustomerAddressChangedEvent; the
        caller emits the event once the change is persisted.

        Args:
            address: New address (already validated by Address itself).
        """
        self.address = address

    def activate(self) -> None:
        """Activate the customer.

        Raises:
            ValidationError: If no address has been assigned.
        """
        if self.address is None:
            raise ValidationError(
                CustomerError.ADDRESS_REQUIRED_TO_ACTIVATE,
                code=ErrorCode.CUSTOMER_ADDRESS_REQUIRED,
                field="address",
            )
        self.active = True

    def deactivate(self) -> None:
        """Deactivate the customer."""
        self.active = False

    def add_reward_points(self, points: float) -> None:
        """Credit reward points.

        Args:
            points: Points to add (non-negative).

        Raises:
            ValidationError: If points is negative.
        """
        if points < 0:
            raise ValidationError(
                CustomerError.INVALID_REWARD_POINTS,
                code=ErrorCode.INVALID_CUSTOMER,
                field="reward_points",
            )
        self.reward_points += points

    # =========================================================================
    # Query Methods
    # =========================================================================

    def is_active(self) -> bool:
        """Check whether the customer is active.

        Returns:
            bool: True if active.
        """
        return self.active
