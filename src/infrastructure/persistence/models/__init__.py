"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - customer.py: Customer model (address stored flat)
    - product.py: Product model
    - order.py: Order and OrderItem models

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.customer import Customer
from src.infrastructure.persistence.models.order import Order, OrderItem
from src.infrastructure.persistence.models.product import Product

__all__ = [
    "Customer",
    "Order",
    "OrderItem",
    "Product",
]
