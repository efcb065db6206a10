"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    OrderRepository,
)
from src.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
]
