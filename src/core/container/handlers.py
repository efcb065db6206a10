"""Command handler dependency factories.

Unit-of-work scoped handler instances. Every repository a handler needs is
built from the same session so the handler's writes commit together.

Usage:
    async with get_database().transaction() as session:
        handler = get_place_order_handler(session)
        result = await handler.handle(PlaceOrder(customer_id="c1", lines=lines))
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import create_event_dispatcher
from src.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        AddOrderItemHandler,
        ChangeCustomerAddressHandler,
        CreateCustomerHandler,
        CreateProductHandler,
        PlaceOrderHandler,
    )
    from src.domain.protocols.event_dispatcher_protocol import (
        EventDispatcherProtocol,
    )


# ============================================================================
# Customer Handler Factories
# ============================================================================


def get_create_customer_handler(
    session: AsyncSession,
    event_dispatcher: "EventDispatcherProtocol | None" = None,
) -> "CreateCustomerHandler":
    """Get CreateCustomer command handler.

    Args:
        session: Database session for the unit of work.
        event_dispatcher: Dispatcher to notify. A new default-wired
            dispatcher is created if omitted.

    Returns:
        CreateCustomerHandler instance.
    """
    from src.application.commands.handlers import CreateCustomerHandler

    return CreateCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=event_dispatcher or create_event_dispatcher(),
    )


def get_change_customer_address_handler(
    session: AsyncSession,
    event_dispatcher: "EventDispatcherProtocol | None" = None,
) -> "ChangeCustomerAddressHandler":
    """Get ChangeCustomerAddress command handler."""
    from src.application.commands.handlers import ChangeCustomerAddressHandler

    return ChangeCustomerAddressHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=event_dispatcher or create_event_dispatcher(),
    )


# ============================================================================
# Product Handler Factories
# ============================================================================


def get_create_product_handler(
    session: AsyncSession,
    event_dispatcher: "EventDispatcherProtocol | None" = None,
) -> "CreateProductHandler":
    """Get CreateProduct command handler."""
    from src.application.commands.handlers import CreateProductHandler

    return CreateProductHandler(
        product_repo=get_product_repository(session),
        event_dispatcher=event_dispatcher or create_event_dispatcher(),
    )


# ============================================================================
# Order Handler Factories
# ============================================================================


def get_place_order_handler(session: AsyncSession) -> "PlaceOrderHandler":
    """Get PlaceOrder command handler.

    Customer, product and order repositories share session, so the new
    order and the customer's reward points commit together.
    """
    from src.application.commands.handlers import PlaceOrderHandler

    return PlaceOrderHandler(
        customer_repo=get_customer_repository(session),
        product_repo=get_product_repository(session),
        order_repo=get_order_repository(session),
    )


def get_add_order_item_handler(session: AsyncSession) -> "AddOrderItemHandler":
    """Get AddOrderItem command handler."""
    from src.application.commands.handlers import AddOrderItemHandler

    return AddOrderItemHandler(
        order_repo=get_order_repository(session),
        product_repo=get_product_repository(session),
    )
