"""Customer repository protocol."""

from typing import Protocol

from src.domain.entities.customer import Customer
from src.domain.protocols.repositories import RepositoryInterface


class CustomerRepository(RepositoryInterface[Customer], Protocol):
    """Protocol for customer persistence operations.

    Address fields are stored flat alongside the customer; a customer
    without an address round-trips with ``address=None``.
    """
