"""Application commands (CQRS write operations).

Commands are immutable data containers describing an intent to change
state. Each command has exactly one handler in ``handlers/`` that
orchestrates entities, repositories and the event dispatcher.
"""

from src.application.commands.customer_commands import (
    ChangeCustomerAddress,
    CreateCustomer,
)
from src.application.commands.order_commands import (
    AddOrderItem,
    OrderLine,
    PlaceOrder,
)
from src.application.commands.product_commands import CreateProduct

__all__ = [
    "AddOrderItem",
    "ChangeCustomerAddress",
    "CreateCustomer",
    "CreateProduct",
    "OrderLine",
    "PlaceOrder",
]
