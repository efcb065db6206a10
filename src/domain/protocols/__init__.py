"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    # Import service protocols
    from src.domain.protocols import EventDispatcherProtocol, LoggerProtocol

    # Import repository protocols
    from src.domain.protocols import CustomerRepository, OrderRepository
"""

# Service protocols
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

# Repository protocols
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.product_repository import ProductRepository
from src.domain.protocols.repositories import RepositoryInterface

__all__ = [
    # Service protocols
    "EventDispatcherProtocol",
    "EventHandlerProtocol",
    "LoggerProtocol",
    # Repository protocols
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
    "RepositoryInterface",
]
