"""Registry Compliance Tests - FAIL FAST on drift.

These tests verify the Event Registry remains synchronized with the
container's handler maps. Tests FAIL if:
- Event registered but a required handler mapping is missing
- A handler is mapped for an event the registry doesn't declare
- Registry statistics don't match expectations

Reference:
    - src/domain/events/registry.py
    - src/core/container/events.py
"""

import pytest

from src.core.container.events import LOGGING_HANDLERS, NOTIFICATION_HANDLERS
from src.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from src.domain.events.registry import (
    EVENT_REGISTRY,
    EventCategory,
    get_all_events,
    get_event_metadata,
    get_events_requiring_handler,
    get_statistics,
)


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify registry is complete and accurate."""

    def test_registry_not_empty(self):
        """Registry must contain events."""
        assert len(EVENT_REGISTRY) > 0, "Registry is empty!"

    def test_all_events_have_metadata(self):
        """Every event must have complete metadata."""
        for meta in EVENT_REGISTRY:
            assert meta.event_class is not None, "Event class missing"
            assert meta.category is not None, "Category missing"
            assert meta.description, f"{meta.event_name} has no description"

    def test_all_domain_events_registered(self):
        """Every concrete event class is in the registry."""
        assert set(get_all_events()) == {
            CustomerCreatedEvent,
            CustomerAddressChangedEvent,
            ProductCreatedEvent,
        }

    def test_event_names_unique(self):
        """Event names are dispatcher routing keys and must not collide."""
        names = [meta.event_name for meta in EVENT_REGISTRY]

        assert len(names) == len(set(names))

    def test_every_event_requires_some_handler(self):
        """Registered events that nothing reacts to are dead weight."""
        for meta in EVENT_REGISTRY:
            assert meta.requires_logging or meta.requires_notification, (
                f"{meta.event_name} requires no handler"
            )

    def test_every_category_has_an_event(self):
        """Categories with no registered event are dead weight."""
        assert {meta.category for meta in EVENT_REGISTRY} == set(EventCategory)

    def test_registry_statistics_accurate(self):
        """Registry statistics must match actual counts."""
        stats = get_statistics()

        assert stats["total_events"] == 3
        assert stats["by_category"] == {
            EventCategory.CUSTOMER.value: 2,
            EventCategory.PRODUCT.value: 1,
        }
        assert stats["requiring_logging"] == 2
        assert stats["requiring_notification"] == 2


@pytest.mark.unit
class TestRegistryLookups:
    """Test registry helper functions."""

    def test_get_event_metadata(self):
        meta = get_event_metadata("CustomerCreatedEvent")

        assert meta is not None
        assert meta.event_class is CustomerCreatedEvent
        assert meta.requires_notification is True

    def test_get_event_metadata_unknown(self):
        assert get_event_metadata("OrderPaidEvent") is None

    def test_get_events_requiring_handler(self):
        assert get_events_requiring_handler("logging") == [
            CustomerCreatedEvent,
            CustomerAddressChangedEvent,
        ]
        assert get_events_requiring_handler("notification") == [
            CustomerCreatedEvent,
            ProductCreatedEvent,
        ]

    def test_get_events_requiring_unknown_handler_raises(self):
        with pytest.raises(ValueError, match="Invalid handler_type"):
            get_events_requiring_handler("audit")


@pytest.mark.unit
class TestHandlerMapCompliance:
    """Verify handler maps match the registry's declared requirements."""

    @pytest.mark.parametrize(
        ("handler_type", "handler_map"),
        [("logging", LOGGING_HANDLERS), ("notification", NOTIFICATION_HANDLERS)],
    )
    def test_required_handlers_exist(self, handler_type, handler_map):
        """Every event requiring a concern has a handler class for it."""
        missing = [
            event_class.__name__
            for event_class in get_events_requiring_handler(handler_type)
            if event_class.__name__ not in handler_map
        ]

        assert not missing, f"Missing {handler_type} handlers: {missing}"

    @pytest.mark.parametrize(
        ("handler_type", "handler_map"),
        [("logging", LOGGING_HANDLERS), ("notification", NOTIFICATION_HANDLERS)],
    )
    def test_no_handlers_for_undeclared_events(self, handler_type, handler_map):
        """Handler maps don't wire events the registry doesn't ask for."""
        declared = {
            event_class.__name__
            for event_class in get_events_requiring_handler(handler_type)
        }

        assert set(handler_map) <= declared

    def test_handlers_expose_handle(self):
        """Every mapped handler class implements handle(event)."""
        for handler_class in [*LOGGING_HANDLERS.values(), *NOTIFICATION_HANDLERS.values()]:
            assert callable(getattr(handler_class, "handle", None)), handler_class
