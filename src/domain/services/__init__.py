"""Domain services.

Stateless operations that span several entities and do not belong to a
single aggregate.
"""

from src.domain.services.order_service import OrderService
from src.domain.services.product_service import ProductService

__all__ = ["OrderService", "ProductService"]
