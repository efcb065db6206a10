"""CreateProduct command handler.

Adds a product to the catalog and emits ProductCreatedEvent.
"""

from typing import cast

from uuid_extensions import uuid7

from src.application.commands.product_commands import CreateProduct
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.domain.events.product_events import ProductCreatedData, ProductCreatedEvent
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.product_repository import ProductRepository


class CreateProductHandler:
    """Handler for CreateProduct command.

    Dependencies (injected via constructor):
        - ProductRepository: For persistence
        - EventDispatcherProtocol: For domain events
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreateProduct) -> Result[Product, str]:
        """Handle CreateProduct command.

        Args:
            cmd: CreateProduct command.

        Returns:
            Success(Product): Product created and persisted.
            Failure(error): Name or price failed validation.
        """
        try:
            product = Product(
                id=cmd.product_id or str(uuid7()),
                name=cmd.name,
                price=cmd.price,
            )
        except ValidationError as e:
            return cast(Result[Product, str], Failure(error=e.message))

        await self._product_repo.create(product)

        event_data: ProductCreatedData = {
            "id": product.id,
            "name": product.name,
            "price": product.price,
        }
        if cmd.description is not None:
            event_data["description"] = cmd.description

        self._event_dispatcher.notify(ProductCreatedEvent(event_data=event_data))

        return Success(value=product)
