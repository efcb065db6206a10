"""Address value object with validation.

Immutable value object describing where a customer lives. Two addresses
with the same fields are the same address.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.errors import AddressError


@dataclass(frozen=True)
class Address:
    """Postal address value object.

    All fields are mandatory; there are no defaults.

    Attributes:
        street: Street name (non-empty).
        number: House number (integer greater than zero).
        zipcode: Postal code (non-empty).
        city: City name (non-empty).

    Raises:
        ValidationError: If any field is empty or number is not positive.

    Example:
        >>> address = Address("Street 1", 1, "13330-250", "Sao Paulo")
        >>> str(address)
        'Street 1, 1, 13330-250, Sao Paulo'
        >>> Address("", 1, "13330-250", "Sao Paulo")
        Traceback (most recent call last):
        ...
        src.core.errors.common_errors.ValidationError: Street is required
    """

    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self) -> None:
        """Validate address fields after initialization.

        Raises:
            ValidationError: If a field is missing or invalid.
        """
        if not self.street or not self.street.strip():
            raise self._invalid(AddressError.STREET_REQUIRED, "street")

        # bool is an int subclass; True is not a house number
        if (
            isinstance(self.number, bool)
            or not isinstance(self.number, int)
            or self.number <= 0
        ):
            raise self._invalid(AddressError.NUMBER_MUST_BE_POSITIVE, "number")

        if not self.zipcode or not self.zipcode.strip():
            raise self._invalid(AddressError.ZIPCODE_REQUIRED, "zipcode")

        if not self.city or not self.city.strip():
            raise self._invalid(AddressError.CITY_REQUIRED, "city")

    @staticmethod
    def _invalid(message: str, field: str) -> ValidationError:
        return ValidationError(message, code=ErrorCode.INVALID_ADDRESS, field=field)

    def to_dict(self) -> dict[str, str | int]:
        """Flatten address for event payloads and persistence.

        Returns:
            dict: street, number, zipcode and city.
        """
        return {
            "street": self.street,
            "number": self.number,
            "zipcode": self.zipcode,
            "city": self.city,
        }

    def __str__(self) -> str:
        """Return address as a single line.

        Returns:
            str: "street, number, zipcode, city".
        """
        return f"{self.street}, {self.number}, {self.zipcode}, {self.city}"
