"""Database persistence infrastructure.

This module provides database-related functionality including:
- Base model for all database entities
- Database connection and session management
- Repository implementations for customers, products and orders
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)

__all__ = [
    "BaseModel",
    "CustomerRepository",
    "Database",
    "OrderRepository",
    "ProductRepository",
]
