"""AddOrderItem command handler."""

from typing import cast

from uuid_extensions import uuid7

from src.application.commands.order_commands import AddOrderItem
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.product_repository import ProductRepository


class AddOrderItemHandler:
    """Handler for AddOrderItem command.

    Dependencies (injected via constructor):
        - OrderRepository: Order lookup and persistence
        - ProductRepository: Product lookup (name and price snapshot)
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    async def handle(self, cmd: AddOrderItem) -> Result[Order, str]:
        """Handle AddOrderItem command.

        Args:
            cmd: AddOrderItem command.

        Returns:
            Success(Order): Item appended and order persisted.
            Failure(error): Order or product not found, or invalid quantity.
                The stored order is untouched.
        """
        try:
            order = await self._order_repo.find(cmd.order_id)
            product = await self._product_repo.find(cmd.product_id)
            order.add_item(
                OrderItem(
                    id=str(uuid7()),
                    name=product.name,
                    price=product.price,
                    product_id=product.id,
                    quantity=cmd.quantity,
                )
            )
        except (NotFoundError, ValidationError) as e:
            return cast(Result[Order, str], Failure(error=e.message))

        await self._order_repo.update(order)

        return Success(value=order)
