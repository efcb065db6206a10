"""Product domain errors."""


class ProductError:
    """Product error constants."""

    ID_REQUIRED = "Id is required"
    NAME_REQUIRED = "Name is required"
    INVALID_PRICE = "Price must be a non-negative number"
    NOT_FOUND = "Product not found"
