"""Customer database model.

Architecture:
    - Address value object flattened into nullable columns
    - A customer without an address stores NULL in all four address columns
    - Reward points stored as float

Reference:
    - src/domain/entities/customer.py
"""

from sqlalchemy import Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Customer(BaseMutableModel):
    """Customer model.

    Fields:
        id: String primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        name: Customer display name
        street, number, zipcode, city: Flattened Address (nullable)
        active: Whether the customer is active
        reward_points: Accumulated reward points
    """

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Customer display name",
    )

    # =========================================================================
    # Address (flattened value object)
    # =========================================================================

    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(50), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # =========================================================================
    # Status
    # =========================================================================

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Whether the customer is active",
    )

    reward_points: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0,
        comment="Accumulated reward points",
    )
