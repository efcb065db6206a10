"""Event dispatcher dependency factory.

Builds EventDispatcher instances with the default handlers wired in using
registry-driven auto-wiring: EVENT_REGISTRY lists every event and which
handler concerns it requires, and the handler maps below say which class
serves each concern for each event.

Unlike the other factories, create_event_dispatcher() is NOT cached: each
call returns a fresh, independent dispatcher.
"""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.enums import HandlerFailurePolicy
from src.domain.events.registry import EVENT_REGISTRY
from src.infrastructure.events.event_dispatcher import EventDispatcher
from src.infrastructure.events.handlers import (
    CustomerAddressChangedHandler,
    LogWhenCustomerIsCreatedHandler,
    NotifyWhenCustomerIsCreatedHandler,
    SendEmailWhenProductIsCreatedHandler,
)

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

# Event name -> handler class, one map per handler concern
LOGGING_HANDLERS = {
    "CustomerCreatedEvent": LogWhenCustomerIsCreatedHandler,
    "CustomerAddressChangedEvent": CustomerAddressChangedHandler,
}

NOTIFICATION_HANDLERS = {
    "CustomerCreatedEvent": NotifyWhenCustomerIsCreatedHandler,
    "ProductCreatedEvent": SendEmailWhenProductIsCreatedHandler,
}

_HANDLER_MAPS = (
    ("requires_logging", "logging", LOGGING_HANDLERS),
    ("requires_notification", "notification", NOTIFICATION_HANDLERS),
)


def create_event_dispatcher(
    logger: "LoggerProtocol | None" = None,
    failure_policy: HandlerFailurePolicy | None = None,
    register_default_handlers: bool | None = None,
) -> EventDispatcher:
    """Build a new event dispatcher.

    Handlers are registered in EVENT_REGISTRY order, logging concern before
    notification concern for the same event. Omitted arguments fall back to
    settings.

    Args:
        logger: Logger for the dispatcher and its handlers. Defaults to
            get_logger().
        failure_policy: Reaction to handler exceptions. Defaults to
            settings.event_handler_failure_policy.
        register_default_handlers: Wire the built-in handlers. Defaults to
            settings.register_default_event_handlers.

    Returns:
        A fresh EventDispatcher (never shared between calls).

    Raises:
        RuntimeError: In strict mode, if a registered event requires a
            handler concern that has no handler class.

    Usage:
        dispatcher = create_event_dispatcher()
        dispatcher.notify(CustomerCreatedEvent(event_data={"id": "1", "name": "A"}))

        # Bare dispatcher for tests
        dispatcher = create_event_dispatcher(register_default_handlers=False)
    """
    from src.core.container.infrastructure import get_logger

    settings = get_settings()
    logger = logger if logger is not None else get_logger()

    if failure_policy is None:
        failure_policy = settings.event_handler_failure_policy

    dispatcher = EventDispatcher(logger=logger, failure_policy=failure_policy)

    if register_default_handlers is None:
        register_default_handlers = settings.register_default_event_handlers

    if not register_default_handlers:
        return dispatcher

    for metadata in EVENT_REGISTRY:
        event_name = metadata.event_name

        for flag, concern, handler_map in _HANDLER_MAPS:
            if not getattr(metadata, flag):
                continue

            handler_class = handler_map.get(event_name)
            if handler_class is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing required {concern} handler\n"
                        f"Event: {event_name}\n\n"
                        f"Fix: Add a handler to {concern.upper()}_HANDLERS in "
                        f"src/core/container/events.py\n"
                        f"Or disable strict mode: Set EVENTS_STRICT_MODE=false in .env"
                    )
                logger.warning(
                    "event_handler_missing",
                    event_type=event_name,
                    concern=concern,
                )
                continue

            dispatcher.register(event_name, handler_class(logger=logger))

    return dispatcher
