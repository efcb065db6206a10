"""Product database model."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Product(BaseMutableModel):
    """Product model.

    Fields:
        id: String primary key (from BaseMutableModel)
        name: Product name
        price: Unit price
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
