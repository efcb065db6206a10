"""Domain errors package.

Exports domain-level error message constants for convenient importing.

Usage:
    from src.domain.errors import CustomerError, OrderError
"""

from src.domain.errors.address_error import AddressError
from src.domain.errors.customer_error import CustomerError
from src.domain.errors.order_error import OrderError
from src.domain.errors.product_error import ProductError

__all__ = [
    "AddressError",
    "CustomerError",
    "OrderError",
    "ProductError",
]
