"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, create_event_dispatcher, ...

The container is organized into modules by concern:
- infrastructure: Core services (database, logging)
- events: Event dispatcher factory with default handler wiring
- repositories: Repository factories (session-bound)
- handlers: Command handler factories (session-bound)
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Event dispatcher
from src.core.container.events import (
    LOGGING_HANDLERS,
    NOTIFICATION_HANDLERS,
    create_event_dispatcher,
)

# Repositories
from src.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)

# Command handlers
from src.core.container.handlers import (
    get_add_order_item_handler,
    get_change_customer_address_handler,
    get_create_customer_handler,
    get_create_product_handler,
    get_place_order_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "LOGGING_HANDLERS",
    "NOTIFICATION_HANDLERS",
    "create_event_dispatcher",
    # Repositories
    "get_customer_repository",
    "get_order_repository",
    "get_product_repository",
    # Command handlers
    "get_add_order_item_handler",
    "get_change_customer_address_handler",
    "get_create_customer_handler",
    "get_create_product_handler",
    "get_place_order_handler",
]
