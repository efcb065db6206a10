"""In-memory domain event dispatcher.

This module implements the EventDispatcherProtocol using a dictionary-based
registry keyed by the event's string type tag. Suitable for a single
process; there is no persistence, retry or cross-process delivery.

Architecture:
    - Implements EventDispatcherProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event name → ordered handlers)
    - Synchronous, sequential delivery in registration order
    - Configurable reaction to handler failures (HandlerFailurePolicy)
    - Explicitly instantiated; the container builds a fresh instance per call

Usage:
    >>> dispatcher = EventDispatcher(logger=get_logger())
    >>> dispatcher.register("CustomerCreatedEvent", LogWhenCustomerIsCreatedHandler(logger))
    >>> dispatcher.notify(CustomerCreatedEvent(event_data={"id": "123", "name": "Customer 1"}))
"""

from collections.abc import Iterator, Mapping
from typing import TypeAlias

from src.core.enums import HandlerFailurePolicy
from src.core.errors import EventDispatchError
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

EventHandler: TypeAlias = EventHandlerProtocol[DomainEvent]


class HandlerRegistryView(Mapping[str, tuple[EventHandler, ...]]):
    """Live, read-only view over a dispatcher's registry.

    Reflects every later register/unregister call. Handler lists are
    exposed as tuples so callers cannot reorder or mutate them.
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: dict[str, list[EventHandler]]) -> None:
        self._handlers = handlers

    def __getitem__(self, event_name: str) -> tuple[EventHandler, ...]:
        return tuple(self._handlers[event_name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"HandlerRegistryView({dict(self.items())!r})"


class EventDispatcher:
    """In-memory, synchronous publish/subscribe broker.

    Thread Safety:
        - NOT thread-safe (single logical thread registers, unregisters
          and notifies sequentially)

    Failure Handling:
        - PROPAGATE (default): the first failing handler is logged at error
          level and its exception re-raised; later handlers do not run.
        - ISOLATE: each failure is logged at warning level, delivery
          continues, and EventDispatchError is raised once all handlers ran.

    Attributes:
        _handlers: Dictionary mapping event name to handlers in
            registration order. Duplicates are kept.
        _logger: Logger for dispatch and handler failures.
        _failure_policy: Reaction to handler exceptions.

    Example:
        >>> dispatcher = EventDispatcher(logger=logger)
        >>> dispatcher.register("CustomerCreatedEvent", handler_1)
        >>> dispatcher.register("CustomerCreatedEvent", handler_2)
        >>> dispatcher.notify(CustomerCreatedEvent(event_data={"id": "1", "name": "A"}))
        >>> # handler_1.handle(event) then handler_2.handle(event)
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        failure_policy: HandlerFailurePolicy = HandlerFailurePolicy.PROPAGATE,
    ) -> None:
        """Initialize an empty dispatcher.

        Args:
            logger: Logger for dispatch (debug) and handler failures.
            failure_policy: What notify() does when a handler raises.
        """
        self._handlers: dict[str, list[EventHandler]] = {}
        self._logger = logger
        self._failure_policy = failure_policy
        self._view = HandlerRegistryView(self._handlers)

    @property
    def event_handlers(self) -> HandlerRegistryView:
        """Live, read-only mapping of event name to ordered handlers.

        Example:
            >>> dispatcher.register("ProductCreatedEvent", handler)
            >>> dispatcher.event_handlers["ProductCreatedEvent"]
            (handler,)
            >>> dispatcher.unregister_all()
            >>> dispatcher.event_handlers.get("ProductCreatedEvent") is None
            True
        """
        return self._view

    @property
    def failure_policy(self) -> HandlerFailurePolicy:
        """Configured reaction to handler exceptions."""
        return self._failure_policy

    def register(self, event_name: str, handler: EventHandler) -> None:
        """Append handler to the ordered list for event_name.

        Creates the list if this is the first handler for the event name.
        No duplicate detection: registering the same handler twice makes
        notify() call it twice.

        Args:
            event_name: Event type tag (e.g. "CustomerCreatedEvent").
            handler: Object exposing ``handle(event)``.
        """
        self._handlers.setdefault(event_name, []).append(handler)

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        """Remove the first reference to handler from event_name's list.

        Matching is by identity, never by equality. Unknown event names and
        handlers that are not registered are ignored. The event name stays
        in the registry even when its list becomes empty.

        Args:
            event_name: Event type tag.
            handler: The exact handler instance that was registered.
        """
        handlers = self._handlers.get(event_name)
        if handlers is None:
            return

        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return

    def unregister_all(self) -> None:
        """Remove every event name and handler from the registry."""
        self._handlers.clear()

    def notify(self, event: DomainEvent) -> None:
        """Deliver event to every handler registered for its name.

        Handlers are called synchronously, in registration order, each with
        the same event instance. An event name with no handlers is a no-op.

        Args:
            event: Domain event to deliver.

        Raises:
            Exception: Under PROPAGATE, whatever the first failing handler
                raised.
            EventDispatchError: Under ISOLATE, after all handlers ran, if
                any of them raised.
        """
        event_name = event.name
        registered = self._handlers.get(event_name)

        if not registered:
            # No handlers registered (not an error)
            return

        # Snapshot so handlers that (un)register during dispatch don't
        # change this delivery
        handlers = tuple(registered)

        self._logger.debug(
            "event_dispatching",
            event_type=event_name,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        failures: list[tuple[EventHandler, Exception]] = []

        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as e:
                if self._failure_policy is HandlerFailurePolicy.PROPAGATE:
                    self._logger.error(
                        "event_handler_failed",
                        error=e,
                        event_type=event_name,
                        event_id=str(event.event_id),
                        handler_name=type(handler).__name__,
                        failure_policy=self._failure_policy.value,
                    )
                    raise

                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_name,
                    event_id=str(event.event_id),
                    handler_name=type(handler).__name__,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    failure_policy=self._failure_policy.value,
                )
                failures.append((handler, e))

        if failures:
            raise EventDispatchError(event_name, failures)
