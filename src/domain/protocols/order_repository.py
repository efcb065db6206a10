"""Order repository protocol.

Orders are persisted as a whole aggregate: the order row and all of its
items are written together.
"""

from typing import Protocol

from src.domain.entities.order import Order
from src.domain.protocols.repositories import RepositoryInterface


class OrderRepository(RepositoryInterface[Order], Protocol):
    """Protocol for order persistence operations.

    **Implementation Notes**:
    - ``create`` stores the order, its computed total and every item
    - ``update`` upserts items and removes items no longer on the aggregate
    - ``find`` / ``find_all`` rebuild Order and OrderItem entities
    """
