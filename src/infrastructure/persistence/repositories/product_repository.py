"""ProductRepository - SQLAlchemy implementation of ProductRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Product entities and database ProductModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.domain.entities.product import Product
from src.domain.errors import ProductError
from src.infrastructure.persistence.models.product import Product as ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, entity: Product) -> None:
        """Persist a new product.

        Args:
            entity: Product entity to store.
        """
        self._session.add(
            ProductModel(id=entity.id, name=entity.name, price=entity.price)
        )
        await self._session.flush()

    async def update(self, entity: Product) -> None:
        """Persist name and price changes.

        Args:
            entity: Product entity to store.

        Raises:
            NotFoundError: If the product was never created.
        """
        model = await self._get_model(entity.id)
        model.name = entity.name
        model.price = entity.price
        await self._session.flush()

    async def find(self, entity_id: str) -> Product:
        """Find product by ID.

        Args:
            entity_id: Product identifier.

        Returns:
            Product entity.

        Raises:
            NotFoundError: If no product has that ID.
        """
        model = await self._get_model(entity_id)
        return self._to_domain(model)

    async def find_all(self) -> list[Product]:
        """Return every stored product, oldest first.

        Returns:
            List of Product entities.
        """
        stmt = select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def _get_model(self, product_id: str) -> ProductModel:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise NotFoundError(
                ProductError.NOT_FOUND,
                code=ErrorCode.PRODUCT_NOT_FOUND,
                resource_type="Product",
                resource_id=product_id,
            )

        return model

    def _to_domain(self, model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=model.price)
