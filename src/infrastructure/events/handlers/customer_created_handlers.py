"""Customer-created event handlers.

Two independent handlers react to CustomerCreatedEvent. They know nothing
about each other and run in the order they were registered.

Handlers:
    - LogWhenCustomerIsCreatedHandler: structured INFO log of the new customer
    - NotifyWhenCustomerIsCreatedHandler: welcome-notification stub (logs intent)

Usage:
    >>> dispatcher = create_event_dispatcher(register_default_handlers=False)
    >>> dispatcher.register("CustomerCreatedEvent", LogWhenCustomerIsCreatedHandler(logger))
    >>> dispatcher.register("CustomerCreatedEvent", NotifyWhenCustomerIsCreatedHandler(logger))
"""

from src.domain.events.customer_events import CustomerCreatedEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class LogWhenCustomerIsCreatedHandler:
    """Log every created customer (INFO level).

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def handle(self, event: CustomerCreatedEvent) -> None:
        """Log the customer-created event.

        Args:
            event: CustomerCreatedEvent with id and name.
        """
        self._logger.info(
            "customer_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=event.event_data["id"],
            name=event.event_data["name"],
        )


class NotifyWhenCustomerIsCreatedHandler:
    """Welcome-notification stub for new customers.

    STUB IMPLEMENTATION: logs that a welcome notification would be sent.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def handle(self, event: CustomerCreatedEvent) -> None:
        """Log the welcome notification intent.

        Args:
            event: CustomerCreatedEvent with id and name.
        """
        self._logger.info(
            "customer_welcome_notification_queued",
            event_id=str(event.event_id),
            customer_id=event.event_data["id"],
            recipient=event.event_data["name"],
        )
