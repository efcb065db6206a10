"""Customer domain errors.

Defines customer-specific error message constants for validation and
state management.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Raised through ValidationError / NotFoundError
    - Application handlers surface them as Failure(message)

Usage:
    from src.core.errors import ValidationError
    from src.domain.errors import CustomerError

    if not name:
        raise ValidationError(CustomerError.NAME_REQUIRED, field="name")
"""


class CustomerError:
    """Customer error constants.

    Error Categories:
        - Validation errors: ID_REQUIRED, NAME_REQUIRED, INVALID_REWARD_POINTS
        - State errors: ADDRESS_REQUIRED_TO_ACTIVATE
        - Lookup errors: NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    ID_REQUIRED = "Id is required"
    """Every customer needs a stable identifier."""

    NAME_REQUIRED = "Name is required"
    """Customer name cannot be empty."""

    INVALID_REWARD_POINTS = "Reward points must be non-negative"
    """Reward points only ever accumulate."""

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    ADDRESS_REQUIRED_TO_ACTIVATE = "Address is mandatory to activate a customer"
    """Activation requires a previously assigned address."""

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    NOT_FOUND = "Customer not found"
    """Customer with given ID does not exist."""
