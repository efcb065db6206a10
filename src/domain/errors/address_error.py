"""Address value object error messages."""


class AddressError:
    """Address error constants.

    Messages carried by ValidationError when an Address cannot be built.
    """

    STREET_REQUIRED = "Street is required"
    NUMBER_MUST_BE_POSITIVE = "Number must be greater than zero"
    ZIPCODE_REQUIRED = "Zipcode is required"
    CITY_REQUIRED = "City is required"
