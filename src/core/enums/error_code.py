"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Carried by ValidationError and NotFoundError so callers can branch on
the failure without parsing messages.

Categories:
- Validation errors (INVALID_*, *_REQUIRED)
- Resource errors (*_NOT_FOUND)
- Dispatch errors (EVENT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_ADDRESS = "invalid_address"
    INVALID_CUSTOMER = "invalid_customer"
    CUSTOMER_ADDRESS_REQUIRED = "customer_address_required"
    INVALID_PRODUCT = "invalid_product"
    INVALID_ORDER = "invalid_order"
    INVALID_ORDER_ITEM = "invalid_order_item"
    ORDER_ITEMS_REQUIRED = "order_items_required"

    # Resource errors
    CUSTOMER_NOT_FOUND = "customer_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    ORDER_NOT_FOUND = "order_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Dispatch errors
    EVENT_HANDLER_FAILED = "event_handler_failed"
