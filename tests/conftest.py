"""Pytest configuration and shared fixtures.

This configuration provides:
1. Marker registration (unit, integration)
2. Domain object factories shared by unit and integration tests
3. A fresh in-memory SQLite database per integration test
4. Cache isolation for container singletons
"""

import inspect
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from src.domain.entities.customer import Customer
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.entities.product import Product
from src.domain.value_objects.address import Address


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Domain Factories
# =============================================================================


def create_address(
    street: str = "Street 1",
    number: int = 1,
    zipcode: str = "Zipcode 1",
    city: str = "City 1",
) -> Address:
    """Helper to create an Address for testing."""
    return Address(street=street, number=number, zipcode=zipcode, city=city)


def create_customer(
    customer_id: str = "c1",
    name: str = "Customer 1",
    address: Address | None = None,
) -> Customer:
    """Helper to create a Customer for testing (no address by default)."""
    return Customer(id=customer_id, name=name, address=address)


def create_product(
    product_id: str = "p1", name: str = "Product 1", price: float = 100
) -> Product:
    """Helper to create a Product for testing."""
    return Product(id=product_id, name=name, price=price)


def create_order_item(
    item_id: str = "i1",
    name: str = "Item 1",
    price: float = 10,
    product_id: str = "p1",
    quantity: int = 2,
) -> OrderItem:
    """Helper to create an OrderItem for testing."""
    return OrderItem(
        id=item_id, name=name, price=price, product_id=product_id, quantity=quantity
    )


def create_order(
    order_id: str = "o1",
    customer_id: str = "c1",
    items: list[OrderItem] | None = None,
) -> Order:
    """Helper to create an Order for testing.

    Default items are [(10, 2), (20, 1)], for a total of 40.
    """
    if items is None:
        items = [
            create_order_item("i1", "Item 1", 10, "p1", 2),
            create_order_item("i2", "Item 2", 20, "p2", 1),
        ]
    return Order(id=order_id, customer_id=customer_id, items=items)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double recording every structured call."""
    return MagicMock()


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset cached settings and container singletons around each test."""
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_database, get_logger

    get_settings.cache_clear()
    get_database.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_database.cache_clear()
    get_logger.cache_clear()


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory SQLite database with all tables created.

    Each test gets its own engine, so no data persists between tests.
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    try:
        yield db
    finally:
        await db.drop_all()
        await db.close()
