"""Order commands (CQRS write operations).

Orders reference products by ID; handlers look the products up and copy
their current name and price onto the order items.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OrderLine:
    """One requested product and quantity.

    Attributes:
        product_id: Product to order.
        quantity: Number of units (validated by OrderItem).
    """

    product_id: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Place an order for a customer.

    Credits the customer with reward points worth half the order total.

    Attributes:
        customer_id: Customer placing the order.
        lines: Requested products (at least one).
        order_id: Optional identifier. Generated (UUID v7) if omitted.

    Example:
        >>> command = PlaceOrder(
        ...     customer_id="c1",
        ...     lines=(OrderLine(product_id="p1", quantity=2),),
        ... )
        >>> result = await handler.handle(command)
    """

    customer_id: str
    lines: tuple[OrderLine, ...]
    order_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class AddOrderItem:
    """Append a product line to an existing order.

    Attributes:
        order_id: Order to extend.
        product_id: Product to add.
        quantity: Number of units.
    """

    order_id: str
    product_id: str
    quantity: int
