"""Order aggregate errors.

Covers both the Order root and its OrderItem children, since item
invariants are enforced as part of the aggregate.
"""


class OrderError:
    """Order error constants.

    Error Categories:
        - Order validation: ID_REQUIRED, CUSTOMER_ID_REQUIRED, ITEMS_REQUIRED
        - Item validation: ITEM_*
        - Lookup errors: NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Order Validation
    # -------------------------------------------------------------------------

    ID_REQUIRED = "Id is required"
    CUSTOMER_ID_REQUIRED = "CustomerId is required"
    ITEMS_REQUIRED = "Items are required"

    # -------------------------------------------------------------------------
    # Item Validation
    # -------------------------------------------------------------------------

    ITEM_ID_REQUIRED = "Item id is required"
    ITEM_NAME_REQUIRED = "Item name is required"
    ITEM_PRODUCT_ID_REQUIRED = "Item productId is required"
    ITEM_INVALID_PRICE = "Item price must be a non-negative number"
    ITEM_QUANTITY_MUST_BE_POSITIVE = "Quantity must be greater than 0"

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    NOT_FOUND = "Order not found"
