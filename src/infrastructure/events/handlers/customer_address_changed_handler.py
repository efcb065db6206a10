"""Customer-address-changed event handler."""

from src.domain.events.customer_events import AddressData, CustomerAddressChangedEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


def format_address(address: AddressData) -> str:
    """Render an address payload as one line.

    Args:
        address: Flat address breakdown from the event payload.

    Returns:
        str: "street, number, zipcode, city".
    """
    return (
        f"{address['street']}, {address['number']}, "
        f"{address['zipcode']}, {address['city']}"
    )


class CustomerAddressChangedHandler:
    """Log a customer's new address (INFO level).

    Example:
        >>> handler = CustomerAddressChangedHandler(logger=get_logger())
        >>> dispatcher.register("CustomerAddressChangedEvent", handler)
        >>> # Log output: {"event": "customer_address_changed",
        >>> #              "address": "Street 1, 1, Zipcode 1, City 1", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerAddressChangedEvent) -> None:
        """Log the address change.

        Args:
            event: CustomerAddressChangedEvent with id, name and address.
        """
        self._logger.info(
            "customer_address_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=event.event_data["id"],
            name=event.event_data["name"],
            address=format_address(event.event_data["address"]),
        )
