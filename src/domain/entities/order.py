"""Order aggregate root.

An order belongs to a customer and owns one or more OrderItems. The
aggregate guarantees it is never empty and that every line has a
positive quantity, both at construction and after add_item().

Usage:
    from src.domain.entities import Order, OrderItem

    item = OrderItem(id="i1", name="Item 1", price=10, product_id="p1", quantity=2)
    order = Order(id="o1", customer_id="c1", items=[item])
    order.total  # 20
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.entities.order_item import OrderItem, is_valid_quantity
from src.domain.errors import OrderError


@dataclass(init=False)
class Order:
    """Order aggregate.

    Items are held privately and exposed as a tuple; add_item() is the only
    way to change the item sequence of an existing order.

    Attributes:
        id: Unique order identifier.
        customer_id: Identifier of the customer placing the order.
        items: Ordered, read-only sequence of order lines (at least one).

    Example:
        >>> order = Order(id="o1", customer_id="c1", items=[
        ...     OrderItem(id="i1", name="A", price=10, product_id="p1", quantity=2),
        ...     OrderItem(id="i2", name="B", price=20, product_id="p2", quantity=1),
        ... ])
        >>> order.total
        40
    """

    id: str
    customer_id: str
    _items: tuple[OrderItem, ...]

    def __init__(
        self,
        id: str,
        customer_id: str,
        items: Iterable[OrderItem] = (),
    ) -> None:
        """Create and validate an order.

        The item sequence is copied, so later changes to the caller's list
        do not reach the order.

        Raises:
            ValidationError: If id/customer_id is empty, there are no items,
                or an item quantity is not a positive integer.
        """
        self.id = id
        self.customer_id = customer_id
        items = tuple(items)
        self._validate(items)
        self._items = items

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Order lines in insertion order."""
        return self._items

    def _validate(self, items: tuple[OrderItem, ...]) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError(
                OrderError.ID_REQUIRED, code=ErrorCode.INVALID_ORDER, field="id"
            )

        if not self.customer_id or not self.customer_id.strip():
            raise ValidationError(
                OrderError.CUSTOMER_ID_REQUIRED,
                code=ErrorCode.INVALID_ORDER,
                field="customer_id",
            )

        if not items:
            raise ValidationError(
                OrderError.ITEMS_REQUIRED,
                code=ErrorCode.ORDER_ITEMS_REQUIRED,
                field="items",
            )

        # Items are mutable; re-check quantities instead of trusting construction
        if not all(is_valid_quantity(item.quantity) for item in items):
            raise ValidationError(
                OrderError.ITEM_QUANTITY_MUST_BE_POSITIVE,
                code=ErrorCode.INVALID_ORDER_ITEM,
                field="items",
            )

    def add_item(self, item: OrderItem) -> None:
        """Append an item and revalidate the aggregate.

        Args:
            item: Order line to append.

        Raises:
            ValidationError: If the resulting order is invalid. The order
                is left unchanged.
        """
        items = (*self._items, item)
        self._validate(items)
        self._items = items

    @property
    def total(self) -> float:
        """Order total (sum of line totals).

        Never cached, so it always reflects the current items.

        Returns:
            float: sum(item.order_number for item in items).
        """
        return sum(item.order_number for item in self._items)
