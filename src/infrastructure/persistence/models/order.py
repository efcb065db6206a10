"""Order and OrderItem database models.

Architecture:
    - Orders belong to customers (FK)
    - Items belong to orders (FK relationship with CASCADE delete)
    - ``total`` is denormalized from the aggregate on every write
    - ``position`` keeps the aggregate's item order across round-trips

Reference:
    - src/domain/entities/order.py
    - src/domain/entities/order_item.py
"""

from sqlalchemy import Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Order(BaseMutableModel):
    """Order model.

    Fields:
        id: String primary key (from BaseMutableModel)
        customer_id: FK to customers table
        total: Order total at last write
    """

    __tablename__ = "orders"

    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
        comment="FK to customers table",
    )

    total: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Sum of item price * quantity",
    )


class OrderItem(BaseMutableModel):
    """Order item model.

    Fields:
        id: String primary key (from BaseMutableModel)
        order_id: FK to orders table (CASCADE delete)
        product_id: Identifier of the ordered product
        name: Product name at order time
        price: Unit price at order time
        quantity: Number of units
        position: Index of the item inside the order

    Indexes:
        - ix_order_items_order_id: FK lookup
        - ix_order_items_order_position: Ordered item loading
    """

    __tablename__ = "order_items"

    order_id: Mapped[str] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to orders table",
    )

    product_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Ordered product (snapshot, not enforced)",
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_order_items_order_position", "order_id", "position"),
    )
