"""Product domain entity.

A sellable product with a non-negative price. Order items copy the
product's name and price at the moment the order is placed.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.errors import ProductError


@dataclass
class Product:
    """Product entity.

    Attributes:
        id: Unique product identifier.
        name: Product name (non-empty).
        price: Unit price (non-negative).
    """

    id: str
    name: str
    price: float

    def __post_init__(self) -> None:
        """Validate product after initialization.

        Raises:
            ValidationError: If id or name is empty, or price is negative.
        """
        self._validate()

    def _validate(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError(
                ProductError.ID_REQUIRED, code=ErrorCode.INVALID_PRODUCT, field="id"
            )

        if not self.name or not self.name.strip():
            raise ValidationError(
                ProductError.NAME_REQUIRED, code=ErrorCode.INVALID_PRODUCT, field="name"
            )

        if self.price < 0:
            raise ValidationError(
                ProductError.INVALID_PRICE, code=ErrorCode.INVALID_PRODUCT, field="price"
            )

    def change_name(self, name: str) -> None:
        """Rename the product.

        Raises:
            ValidationError: If name is empty. The old name is kept.
        """
        previous = self.name
        self.name = name
        try:
            self._validate()
        except ValidationError:
            self.name = previous
            raise

    def change_price(self, price: float) -> None:
        """Set a new unit price.

        Raises:
            ValidationError: If price is negative. The old price is kept.
        """
        previous = self.price
        self.price = price
        try:
            self._validate()
        except ValidationError:
            self.price = previous
            raise
