"""Command handlers (one per command)."""

from src.application.commands.handlers.add_order_item_handler import (
    AddOrderItemHandler,
)
from src.application.commands.handlers.change_customer_address_handler import (
    ChangeCustomerAddressHandler,
)
from src.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.handlers.place_order_handler import PlaceOrderHandler

__all__ = [
    "AddOrderItemHandler",
    "ChangeCustomerAddressHandler",
    "CreateCustomerHandler",
    "CreateProductHandler",
    "PlaceOrderHandler",
]
