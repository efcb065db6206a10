"""Order domain service.

Places orders for customers and aggregates totals across orders.

Reward rule:
    A customer earns half of the order total in reward points every time
    an order is placed.
"""

from collections.abc import Iterable

from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.entities.customer import Customer
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.errors import OrderError

REWARD_POINTS_RATE = 0.5


class OrderService:
    """Stateless order operations."""

    @staticmethod
    def total(orders: Iterable[Order]) -> float:
        """Sum the totals of several orders.

        Args:
            orders: Orders to add up.

        Returns:
            float: Combined total (0 for no orders).
        """
        return sum(order.total for order in orders)

    @staticmethod
    def place_order(
        customer: Customer,
        items: list[OrderItem],
        order_id: str | None = None,
    ) -> Order:
        """Create an order for a customer and credit reward points.

        Args:
            customer: Customer placing the order.
            items: Order lines (at least one).
            order_id: Explicit order identifier. Generated (UUID v7) if omitted.

        Returns:
            Order: The new order.

        Raises:
            ValidationError: If items is empty or the order is otherwise invalid.
                The customer's reward points are untouched in that case.
        """
        if not items:
            raise ValidationError(
                OrderError.ITEMS_REQUIRED,
                code=ErrorCode.ORDER_ITEMS_REQUIRED,
                field="items",
            )

        order = Order(
            id=order_id or str(uuid7()),
            customer_id=customer.id,
            items=items,
        )
        customer.add_reward_points(order.total * REWARD_POINTS_RATE)
        return order
