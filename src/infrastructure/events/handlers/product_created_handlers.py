"""Product-created event handlers.

SendEmailWhenProductIsCreatedHandler is a STUB: it logs that the catalog
announcement email would be sent. Replace the log call with an email
adapter once one exists; the handler contract (``handle(event)``) stays
the same.
"""

from src.domain.events.product_events import ProductCreatedEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class SendEmailWhenProductIsCreatedHandler:
    """Announce new products by email (stub - logs intent).

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def handle(self, event: ProductCreatedEvent) -> None:
        """Log the product announcement email intent.

        Args:
            event: ProductCreatedEvent with name and price (id and
                description optional).
        """
        self._logger.info(
            "product_created_email_queued",
            event_id=str(event.event_id),
            template="product_created",
            product_id=event.event_data.get("id"),
            name=event.event_data["name"],
            price=event.event_data["price"],
        )
