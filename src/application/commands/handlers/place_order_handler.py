"""PlaceOrder command handler.

Places an order for an existing customer: resolves every requested product,
delegates order creation and reward points to OrderService, then persists
the new order and the updated customer.

Architecture:
- Application layer handler (orchestrates business logic)
- No domain event (order placement is not observed by any handler)
- Both writes are expected to share one session/transaction
"""

from typing import cast

from uuid_extensions import uuid7

from src.application.commands.order_commands import PlaceOrder
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.product_repository import ProductRepository
from src.domain.services.order_service import OrderService


class PlaceOrderHandler:
    """Handler for PlaceOrder command.

    Dependencies (injected via constructor):
        - CustomerRepository: Customer lookup and reward point update
        - ProductRepository: Product lookup (name and price snapshot)
        - OrderRepository: Order persistence
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            customer_repo: Customer repository.
            product_repo: Product repository.
            order_repo: Order repository.
        """
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo

    async def handle(self, cmd: PlaceOrder) -> Result[Order, str]:
        """Handle PlaceOrder command.

        Args:
            cmd: PlaceOrder command.

        Returns:
            Success(Order): Order placed; customer credited with total / 2
                reward points.
            Failure(error): Customer or product not found, no lines, or an
                invalid quantity.
        """
        try:
            customer = await self._customer_repo.find(cmd.customer_id)

            items: list[OrderItem] = []
            for line in cmd.lines:
                product = await self._product_repo.find(line.product_id)
                items.append(
                    OrderItem(
                        id=str(uuid7()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=line.quantity,
                    )
                )

            order = OrderService.place_order(customer, items, order_id=cmd.order_id)
        except (NotFoundError, ValidationError) as e:
            return cast(Result[Order, str], Failure(error=e.message))

        await self._order_repo.create(order)
        await self._customer_repo.update(customer)

        return Success(value=order)
