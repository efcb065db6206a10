"""CreateCustomer command handler.

Handles customer registration: builds the Customer entity, persists it and
emits CustomerCreatedEvent.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events)
- Uses Result types for error handling
- Emits the domain event only after the repository call succeeded
"""

from typing import cast

from uuid_extensions import uuid7

from src.application.commands.customer_commands import CreateCustomer
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.customer import Customer
from src.domain.events.customer_events import CustomerCreatedEvent
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol


class CreateCustomerHandler:
    """Handler for CreateCustomer command.

    Dependencies (injected via constructor):
        - CustomerRepository: For persistence
        - EventDispatcherProtocol: For domain events
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            customer_repo: Customer repository.
            event_dispatcher: Dispatcher notified with CustomerCreatedEvent.
        """
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreateCustomer) -> Result[Customer, str]:
        """Handle CreateCustomer command.

        Args:
            cmd: CreateCustomer command.

        Returns:
            Success(Customer): Customer created and persisted.
            Failure(error): Name (or id) failed validation.

        Side Effects:
            - Inserts the customer
            - Notifies CustomerCreatedEvent (after the insert)
        """
        try:
            customer = Customer(id=cmd.customer_id or str(uuid7()), name=cmd.name)
            if cmd.address is not None:
                customer.change_address(cmd.address)
        except ValidationError as e:
            return cast(Result[Customer, str], Failure(error=e.message))

        await self._customer_repo.create(customer)

        self._event_dispatcher.notify(
            CustomerCreatedEvent(
                event_data={"id": customer.id, "name": customer.name},
            )
        )

        return Success(value=customer)
