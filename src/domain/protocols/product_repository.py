"""Product repository protocol."""

from typing import Protocol

from src.domain.entities.product import Product
from src.domain.protocols.repositories import RepositoryInterface


class ProductRepository(RepositoryInterface[Product], Protocol):
    """Protocol for product persistence operations."""
