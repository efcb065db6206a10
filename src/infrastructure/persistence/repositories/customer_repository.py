"""CustomerRepository - SQLAlchemy implementation of CustomerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Customer entities and database CustomerModel.

Reference:
    - src/domain/entities/customer.py
    - src/domain/protocols/customer_repository.py
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.domain.entities.customer import Customer
from src.domain.errors import CustomerError
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models.customer import Customer as CustomerModel


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepository protocol.

    This is an adapter that implements the CustomerRepository port.
    It handles the mapping between domain Customer entities and
    database CustomerModel.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CustomerRepository(session)
        ...     customer = await repo.find("123")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, entity: Customer) -> None:
        """Persist a new customer.

        Args:
            entity: Customer entity to store.
        """
        self._session.add(self._to_model(entity))
        await self._session.flush()

    async def update(self, entity: Customer) -> None:
        """Persist changes to an existing customer.

        Args:
            entity: Customer entity to store.

        Raises:
            NotFoundError: If the customer was never created.
        """
        model = await self._get_model(entity.id)
        self._update_model(model, entity)
        await self._session.flush()

    async def find(self, entity_id: str) -> Customer:
        """Find customer by ID.

        Args:
            entity_id: Customer identifier.

        Returns:
            Customer entity.

        Raises:
            NotFoundError: If no customer has that ID.
        """
        model = await self._get_model(entity_id)
        return self._to_domain(model)

    async def find_all(self) -> list[Customer]:
        """Return every stored customer, oldest first.

        Returns:
            List of Customer entities.
        """
        stmt = select(CustomerModel).order_by(CustomerModel.created_at, CustomerModel.id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def _get_model(self, customer_id: str) -> CustomerModel:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise NotFoundError(
                CustomerError.NOT_FOUND,
                code=ErrorCode.CUSTOMER_NOT_FOUND,
                resource_type="Customer",
                resource_id=customer_id,
            )

        return model

    def _to_domain(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy Customer model.

        Returns:
            Domain Customer entity.
        """
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,  # type: ignore[arg-type]
                zipcode=model.zipcode,  # type: ignore[arg-type]
                city=model.city,  # type: ignore[arg-type]
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Convert domain entity to database model.

        Args:
            entity: Domain Customer entity.

        Returns:
            SQLAlchemy Customer model.
        """
        model = CustomerModel(id=entity.id)
        self._update_model(model, entity)
        return model

    def _update_model(self, model: CustomerModel, entity: Customer) -> None:
        """Copy entity state onto a model.

        Args:
            model: Existing or new SQLAlchemy model.
            entity: Domain entity with current state.
        """
        model.name = entity.name
        model.active = entity.active
        model.reward_points = entity.reward_points

        address = entity.address
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zipcode if address else None
        model.city = address.city if address else None
