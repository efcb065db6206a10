"""Event handlers for infrastructure integration.

This module exports all event handlers that react to domain events and
perform observational side effects (logging, notification stubs).

Handlers:
    - LogWhenCustomerIsCreatedHandler: CustomerCreatedEvent → INFO log
    - NotifyWhenCustomerIsCreatedHandler: CustomerCreatedEvent → welcome stub
    - CustomerAddressChangedHandler: CustomerAddressChangedEvent → INFO log
    - SendEmailWhenProductIsCreatedHandler: ProductCreatedEvent → email stub

Every handler takes a LoggerProtocol and exposes ``handle(event)``.

Usage:
    >>> from src.infrastructure.events.handlers import CustomerAddressChangedHandler
    >>>
    >>> dispatcher.register(
    ...     "CustomerAddressChangedEvent",
    ...     CustomerAddressChangedHandler(logger=logger),
    ... )
"""

from src.infrastructure.events.handlers.customer_address_changed_handler import (
    CustomerAddressChangedHandler,
)
from src.infrastructure.events.handlers.customer_created_handlers import (
    LogWhenCustomerIsCreatedHandler,
    NotifyWhenCustomerIsCreatedHandler,
)
from src.infrastructure.events.handlers.product_created_handlers import (
    SendEmailWhenProductIsCreatedHandler,
)

__all__ = [
    "CustomerAddressChangedHandler",
    "LogWhenCustomerIsCreatedHandler",
    "NotifyWhenCustomerIsCreatedHandler",
    "SendEmailWhenProductIsCreatedHandler",
]
