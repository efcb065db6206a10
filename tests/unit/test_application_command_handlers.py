"""Unit tests for the checkout command handlers.

Tests cover:
- CreateCustomer / ChangeCustomerAddress / CreateProduct emit their events
  only after the repository call succeeded
- PlaceOrder resolves products, credits reward points, persists both
- AddOrderItem appends and persists
- Validation / not-found errors become Failure(message)
- Handler exceptions propagate to the caller

Architecture:
- Unit tests with AsyncMock repositories and MagicMock dispatcher
"""

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from src.application.commands import (
    AddOrderItem,
    ChangeCustomerAddress,
    CreateCustomer,
    CreateProduct,
    OrderLine,
    PlaceOrder,
)
from src.application.commands.handlers import (
    AddOrderItemHandler,
    ChangeCustomerAddressHandler,
    CreateCustomerHandler,
    CreateProductHandler,
    PlaceOrderHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from src.domain.protocols import (
    CustomerRepository,
    EventDispatcherProtocol,
    OrderRepository,
    ProductRepository,
)
from tests.conftest import (
    create_address,
    create_customer,
    create_order,
    create_product,
)


# =============================================================================
# Test Helpers
# =============================================================================


def not_found(message: str, resource_type: str, resource_id: str) -> NotFoundError:
    return NotFoundError(
        message,
        code=ErrorCode.RESOURCE_NOT_FOUND,
        resource_type=resource_type,
        resource_id=resource_id,
    )


@pytest.fixture
def customer_repo():
    return AsyncMock(spec=CustomerRepository)


@pytest.fixture
def product_repo():
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def order_repo():
    return AsyncMock(spec=OrderRepository)


@pytest.fixture
def dispatcher():
    return MagicMock(spec=EventDispatcherProtocol)


# =============================================================================
# CreateCustomer
# =============================================================================


@pytest.mark.unit
class TestCreateCustomerHandler:
    """Test CreateCustomerHandler."""

    async def test_creates_persists_and_notifies(self, customer_repo, dispatcher):
        handler = CreateCustomerHandler(customer_repo, dispatcher)

        result = await handler.handle(
            CreateCustomer(name="Customer 1", customer_id="123")
        )

        assert isinstance(result, Success)
        customer = result.value
        assert customer.id == "123"
        assert customer.name == "Customer 1"
        customer_repo.create.assert_awaited_once_with(customer)

        dispatcher.notify.assert_called_once()
        event = dispatcher.notify.call_args.args[0]
        assert isinstance(event, CustomerCreatedEvent)
        assert event.event_data == {"id": "123", "name": "Customer 1"}

    async def test_generates_id_when_missing(self, customer_repo, dispatcher):
        handler = CreateCustomerHandler(customer_repo, dispatcher)

        result = await handler.handle(CreateCustomer(name="Customer 1"))

        assert isinstance(result, Success)
        assert result.value.id

    async def test_sets_initial_address(self, customer_repo, dispatcher):
        handler = CreateCustomerHandler(customer_repo, dispatcher)
        address = create_address()

        result = await handler.handle(CreateCustomer(name="Customer 1", address=address))

        assert isinstance(result, Success)
        assert result.value.address == address

    async def test_invalid_name_returns_failure_without_side_effects(
        self, customer_repo, dispatcher
    ):
        handler = CreateCustomerHandler(customer_repo, dispatcher)

        result = await handler.handle(CreateCustomer(name=""))

        assert result == Failure(error="Name is required")
        customer_repo.create.assert_not_awaited()
        dispatcher.notify.assert_not_called()

    async def test_repository_error_prevents_notification(
        self, customer_repo, dispatcher
    ):
        customer_repo.create.side_effect = RuntimeError("database down")
        handler = CreateCustomerHandler(customer_repo, dispatcher)

        with pytest.raises(RuntimeError, match="database down"):
            await handler.handle(CreateCustomer(name="Customer 1"))

        dispatcher.notify.assert_not_called()

    async def test_handler_exception_propagates(self, customer_repo, dispatcher):
        dispatcher.notify.side_effect = ValueError("handler broke")
        handler = CreateCustomerHandler(customer_repo, dispatcher)

        with pytest.raises(ValueError, match="handler broke"):
            await handler.handle(CreateCustomer(name="Customer 1"))

        customer_repo.create.assert_awaited_once()


# =============================================================================
# ChangeCustomerAddress
# =============================================================================


@pytest.mark.unit
class TestChangeCustomerAddressHandler:
    """Test ChangeCustomerAddressHandler."""

    async def test_changes_address_and_notifies(self, customer_repo, dispatcher):
        customer = create_customer(customer_id="123", name="Customer 1")
        customer_repo.find.return_value = customer
        handler = ChangeCustomerAddressHandler(customer_repo, dispatcher)
        address = create_address()

        result = await handler.handle(
            ChangeCustomerAddress(customer_id="123", address=address)
        )

        assert result == Success(value=customer)
        assert customer.address == address
        customer_repo.update.assert_awaited_once_with(customer)

        event = dispatcher.notify.call_args.args[0]
        assert isinstance(event, CustomerAddressChangedEvent)
        assert event.event_data == {
            "id": "123",
            "name": "Customer 1",
            "address": {
                "street": "Street 1",
                "number": 1,
                "zipcode": "Zipcode 1",
                "city": "City 1",
            },
        }

    async def test_customer_not_found(self, customer_repo, dispatcher):
        customer_repo.find.side_effect = not_found("Customer not found", "Customer", "x")
        handler = ChangeCustomerAddressHandler(customer_repo, dispatcher)

        result = await handler.handle(
            ChangeCustomerAddress(customer_id="x", address=create_address())
        )

        assert result == Failure(error="Customer not found")
        customer_repo.update.assert_not_awaited()
        dispatcher.notify.assert_not_called()


# =============================================================================
# CreateProduct
# =============================================================================


@pytest.mark.unit
class TestCreateProductHandler:
    """Test CreateProductHandler."""

    async def test_creates_and_notifies_with_description(
        self, product_repo, dispatcher
    ):
        handler = CreateProductHandler(product_repo, dispatcher)

        result = await handler.handle(
            CreateProduct(
                name="Product 1",
                price=10.0,
                description="Product 1 description",
                product_id="p1",
            )
        )

        assert isinstance(result, Success)
        product_repo.create.assert_awaited_once_with(result.value)
        event = dispatcher.notify.call_args.args[0]
        assert isinstance(event, ProductCreatedEvent)
        assert event.event_data == {
            "id": "p1",
            "name": "Product 1",
            "price": 10.0,
            "description": "Product 1 description",
        }

    async def test_description_omitted_from_payload_when_missing(
        self, product_repo, dispatcher
    ):
        handler = CreateProductHandler(product_repo, dispatcher)

        await handler.handle(CreateProduct(name="Product 1", price=10.0))

        event = dispatcher.notify.call_args.args[0]
        assert "description" not in event.event_data

    async def test_negative_price_returns_failure(self, product_repo, dispatcher):
        handler = CreateProductHandler(product_repo, dispatcher)

        result = await handler.handle(CreateProduct(name="Product 1", price=-1))

        assert result == Failure(error="Price must be a non-negative number")
        product_repo.create.assert_not_awaited()
        dispatcher.notify.assert_not_called()


# =============================================================================
# PlaceOrder
# =============================================================================


@pytest.mark.unit
class TestPlaceOrderHandler:
    """Test PlaceOrderHandler."""

    async def test_places_order_and_credits_reward_points(
        self, customer_repo, product_repo, order_repo
    ):
        customer = create_customer()
        customer_repo.find.return_value = customer
        products = {
            "p1": create_product("p1", "Product 1", 10),
            "p2": create_product("p2", "Product 2", 20),
        }
        product_repo.find.side_effect = lambda product_id: products[product_id]
        handler = PlaceOrderHandler(customer_repo, product_repo, order_repo)

        result = await handler.handle(
            PlaceOrder(
                customer_id="c1",
                lines=(
                    OrderLine(product_id="p1", quantity=2),
                    OrderLine(product_id="p2", quantity=1),
                ),
                order_id="o1",
            )
        )

        assert isinstance(result, Success)
        order = result.value
        assert order.id == "o1"
        assert order.total == 40
        assert [(item.name, item.price, item.quantity) for item in order.items] == [
            ("Product 1", 10, 2),
            ("Product 2", 20, 1),
        ]
        assert customer.reward_points == 20
        order_repo.create.assert_awaited_once_with(order)
        customer_repo.update.assert_awaited_once_with(customer)
        assert product_repo.find.await_args_list == [call("p1"), call("p2")]

    async def test_unknown_product_returns_failure(
        self, customer_repo, product_repo, order_repo
    ):
        customer = create_customer()
        customer_repo.find.return_value = customer
        product_repo.find.side_effect = not_found("Product not found", "Product", "p9")
        handler = PlaceOrderHandler(customer_repo, product_repo, order_repo)

        result = await handler.handle(
            PlaceOrder(customer_id="c1", lines=(OrderLine(product_id="p9", quantity=1),))
        )

        assert result == Failure(error="Product not found")
        assert customer.reward_points == 0
        order_repo.create.assert_not_awaited()
        customer_repo.update.assert_not_awaited()

    async def test_unknown_customer_returns_failure(
        self, customer_repo, product_repo, order_repo
    ):
        customer_repo.find.side_effect = not_found("Customer not found", "Customer", "c9")
        handler = PlaceOrderHandler(customer_repo, product_repo, order_repo)

        result = await handler.handle(
            PlaceOrder(customer_id="c9", lines=(OrderLine(product_id="p1", quantity=1),))
        )

        assert result == Failure(error="Customer not found")
        product_repo.find.assert_not_awaited()

    async def test_no_lines_returns_failure(
        self, customer_repo, product_repo, order_repo
    ):
        customer_repo.find.return_value = create_customer()
        handler = PlaceOrderHandler(customer_repo, product_repo, order_repo)

        result = await handler.handle(PlaceOrder(customer_id="c1", lines=()))

        assert result == Failure(error="Items are required")
        order_repo.create.assert_not_awaited()

    async def test_zero_quantity_returns_failure(
        self, customer_repo, product_repo, order_repo
    ):
        customer_repo.find.return_value = create_customer()
        product_repo.find.return_value = create_product()
        handler = PlaceOrderHandler(customer_repo, product_repo, order_repo)

        result = await handler.handle(
            PlaceOrder(customer_id="c1", lines=(OrderLine(product_id="p1", quantity=0),))
        )

        assert result == Failure(error="Quantity must be greater than 0")


# =============================================================================
# AddOrderItem
# =============================================================================


@pytest.mark.unit
class TestAddOrderItemHandler:
    """Test AddOrderItemHandler."""

    async def test_appends_item_and_persists(self, order_repo, product_repo):
        order = create_order()
        order_repo.find.return_value = order
        product_repo.find.return_value = create_product("p3", "Product 3", 5)
        handler = AddOrderItemHandler(order_repo, product_repo)

        result = await handler.handle(
            AddOrderItem(order_id="o1", product_id="p3", quantity=4)
        )

        assert result == Success(value=order)
        assert len(order.items) == 3
        assert order.total == 60
        order_repo.update.assert_awaited_once_with(order)

    async def test_order_not_found(self, order_repo, product_repo):
        order_repo.find.side_effect = not_found("Order not found", "Order", "o9")
        handler = AddOrderItemHandler(order_repo, product_repo)

        result = await handler.handle(
            AddOrderItem(order_id="o9", product_id="p1", quantity=1)
        )

        assert result == Failure(error="Order not found")
        order_repo.update.assert_not_awaited()

    async def test_invalid_quantity_leaves_order_unchanged(
        self, order_repo, product_repo
    ):
        order = create_order()
        order_repo.find.return_value = order
        product_repo.find.return_value = create_product()
        handler = AddOrderItemHandler(order_repo, product_repo)

        result = await handler.handle(
            AddOrderItem(order_id="o1", product_id="p1", quantity=0)
        )

        assert isinstance(result, Failure)
        assert len(order.items) == 2
        order_repo.update.assert_not_awaited()
