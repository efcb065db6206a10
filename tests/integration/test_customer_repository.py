"""Integration tests for CustomerRepository.

Tests cover:
- Create and find (with and without address)
- Update (name, address, activation, reward points)
- find_all
- NotFoundError for unknown IDs (find and update)

Architecture:
- Integration tests with REAL SQLite database (aiosqlite, in-memory)
- Uses test_database fixture (fresh instance per test)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from tests.conftest import create_address, create_customer


@pytest.mark.integration
class TestCustomerRepository:
    """Test CustomerRepository against SQLite."""

    async def test_create_and_find_customer(self, test_database):
        customer = create_customer(customer_id="123", name="Customer 1")

        async with test_database.get_session() as session:
            await CustomerRepository(session).create(customer)

        async with test_database.get_session() as session:
            found = await CustomerRepository(session).find("123")

        assert found == customer
        assert found.address is None
        assert found.active is False
        assert found.reward_points == 0

    async def test_create_customer_with_address(self, test_database):
        customer = create_customer(customer_id="123", address=create_address())
        customer.activate()

        async with test_database.get_session() as session:
            await CustomerRepository(session).create(customer)

        async with test_database.get_session() as session:
            found = await CustomerRepository(session).find("123")

        assert found.address == create_address()
        assert found.is_active() is True

    async def test_update_customer(self, test_database):
        customer = create_customer(customer_id="123", name="Customer 1")
        async with test_database.get_session() as session:
            await CustomerRepository(session).create(customer)

        customer.change_name("Customer 2")
        customer.change_address(create_address(street="Street 2", number=2))
        customer.activate()
        customer.add_reward_points(12.5)
        async with test_database.get_session() as session:
            await CustomerRepository(session).update(customer)

        async with test_database.get_session() as session:
            found = await CustomerRepository(session).find("123")

        assert found.name == "Customer 2"
        assert str(found.address) == "Street 2, 2, Zipcode 1, City 1"
        assert found.active is True
        assert found.reward_points == 12.5

    async def test_find_unknown_customer_raises(self, test_database):
        async with test_database.get_session() as session:
            with pytest.raises(NotFoundError, match="Customer not found") as exc_info:
                await CustomerRepository(session).find("456ABC")

        assert exc_info.value.code == ErrorCode.CUSTOMER_NOT_FOUND
        assert exc_info.value.resource_id == "456ABC"

    async def test_update_unknown_customer_raises(self, test_database):
        async with test_database.get_session() as session:
            with pytest.raises(NotFoundError, match="Customer not found"):
                await CustomerRepository(session).update(create_customer("missing"))

    async def test_find_all_customers(self, test_database):
        customer_1 = create_customer(customer_id="123", name="Customer 1")
        customer_2 = create_customer(customer_id="456", name="Customer 2")
        customer_2.add_reward_points(20)

        async with test_database.get_session() as session:
            repo = CustomerRepository(session)
            await repo.create(customer_1)
            await repo.create(customer_2)

        async with test_database.get_session() as session:
            customers = await CustomerRepository(session).find_all()

        assert sorted(customers, key=lambda c: c.id) == [customer_1, customer_2]

    async def test_find_all_empty(self, test_database):
        async with test_database.get_session() as session:
            assert await CustomerRepository(session).find_all() == []
