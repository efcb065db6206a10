"""OrderItem entity.

A line of an Order. Owned by the Order aggregate: it is created and
validated with the order and persisted through the order repository.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.errors import OrderError


def is_valid_quantity(quantity: object) -> bool:
    """Check that quantity is an int greater than zero (bool excluded)."""
    # bool is an int subclass; True is not a quantity
    return (
        isinstance(quantity, int)
        and not isinstance(quantity, bool)
        and quantity > 0
    )


@dataclass
class OrderItem:
    """Order line.

    Attributes:
        id: Unique item identifier.
        name: Product name at order time.
        price: Unit price at order time (non-negative).
        product_id: Identifier of the ordered product.
        quantity: Number of units (integer greater than zero).

    Example:
        >>> item = OrderItem(id="i1", name="Item 1", price=10, product_id="p1", quantity=2)
        >>> item.order_number
        20
    """

    id: str
    name: str
    price: float
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        """Validate item after initialization.

        Raises:
            ValidationError: If a field is empty or quantity is not a positive
                integer.
        """
        if not self.id or not self.id.strip():
            raise self._invalid(OrderError.ITEM_ID_REQUIRED, "id")

        if not self.name or not self.name.strip():
            raise self._invalid(OrderError.ITEM_NAME_REQUIRED, "name")

        if not self.product_id or not self.product_id.strip():
            raise self._invalid(OrderError.ITEM_PRODUCT_ID_REQUIRED, "product_id")

        if self.price < 0:
            raise self._invalid(OrderError.ITEM_INVALID_PRICE, "price")

        if not is_valid_quantity(self.quantity):
            raise self._invalid(OrderError.ITEM_QUANTITY_MUST_BE_POSITIVE, "quantity")

    @staticmethod
    def _invalid(message: str, field: str) -> ValidationError:
        return ValidationError(message, code=ErrorCode.INVALID_ORDER_ITEM, field=field)

    @property
    def order_number(self) -> float:
        """Line total (unit price times quantity).

        Recomputed on every access.

        Returns:
            float: price * quantity.
        """
        return self.price * self.quantity
