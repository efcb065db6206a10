"""ChangeCustomerAddress command handler.

Replaces a customer's address and emits CustomerAddressChangedEvent with
the full address in the payload.
"""

from typing import cast

from src.application.commands.customer_commands import ChangeCustomerAddress
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.customer import Customer
from src.domain.events.customer_events import CustomerAddressChangedEvent
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol


class ChangeCustomerAddressHandler:
    """Handler for ChangeCustomerAddress command.

    Dependencies (injected via constructor):
        - CustomerRepository: For lookup and persistence
        - EventDispatcherProtocol: For domain events
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: ChangeCustomerAddress) -> Result[Customer, str]:
        """Handle ChangeCustomerAddress command.

        Args:
            cmd: ChangeCustomerAddress command.

        Returns:
            Success(Customer): Address replaced and persisted.
            Failure(error): Customer not found.

        Side Effects:
            - Updates the customer
            - Notifies CustomerAddressChangedEvent (after the update)
        """
        try:
            customer = await self._customer_repo.find(cmd.customer_id)
        except NotFoundError as e:
            return cast(Result[Customer, str], Failure(error=e.message))

        customer.change_address(cmd.address)
        await self._customer_repo.update(customer)

        self._event_dispatcher.notify(
            CustomerAddressChangedEvent(
                event_data={
                    "id": customer.id,
                    "name": customer.name,
                    "address": {
                        "street": cmd.address.street,
                        "number": cmd.address.number,
                        "zipcode": cmd.address.zipcode,
                        "city": cmd.address.city,
                    },
                },
            )
        )

        return Success(value=customer)
