"""OrderRepository - SQLAlchemy implementation of OrderRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain Order aggregate (Order + OrderItems) and the
OrderModel / OrderItemModel tables.

Architecture:
    - The aggregate is written as a whole (order row + all item rows)
    - ``total`` is recomputed from the entity on every write
    - Items are loaded by ``position`` so their order survives round-trips

Reference:
    - src/domain/entities/order.py
    - src/domain/protocols/order_repository.py
"""

from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.errors import OrderError
from src.infrastructure.persistence.models.order import Order as OrderModel
from src.infrastructure.persistence.models.order import OrderItem as OrderItemModel


class OrderRepository:
    """SQLAlchemy implementation of OrderRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.transaction() as session:
        ...     repo = OrderRepository(session)
        ...     await repo.create(order)
        ...     found = await repo.find(order.id)
        ...     found.total == order.total
        True
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, entity: Order) -> None:
        """Persist a new order with all of its items.

        Args:
            entity: Order aggregate to store.
        """
        self._session.add(
            OrderModel(
                id=entity.id,
                customer_id=entity.customer_id,
                total=entity.total,
            )
        )
        self._session.add_all(
            self._to_item_model(entity.id, position, item)
            for position, item in enumerate(entity.items)
        )
        await self._session.flush()

    async def update(self, entity: Order) -> None:
        """Persist changes to an existing order.

        Items still on the aggregate are upserted by ID; stored items that
        are no longer on the aggregate are deleted.

        Args:
            entity: Order aggregate to store.

        Raises:
            NotFoundError: If the order was never created.
        """
        model = await self._get_model(entity.id)
        model.customer_id = entity.customer_id
        model.total = entity.total

        existing = {item.id: item for item in await self._load_items([entity.id])}

        for position, item in enumerate(entity.items):
            item_model = existing.pop(item.id, None)
            if item_model is None:
                self._session.add(self._to_item_model(entity.id, position, item))
            else:
                self._update_item_model(item_model, position, item)

        if existing:
            await self._session.execute(
                delete(OrderItemModel).where(OrderItemModel.id.in_(list(existing)))
            )

        await self._session.flush()

    async def find(self, entity_id: str) -> Order:
        """Find order by ID, items included.

        Args:
            entity_id: Order identifier.

        Returns:
            Order aggregate.

        Raises:
            NotFoundError: If no order has that ID.
        """
        model = await self._get_model(entity_id)
        items = await self._load_items([model.id])
        return self._to_domain(model, items)

    async def find_all(self) -> list[Order]:
        """Return every stored order with its items, oldest first.

        Returns:
            List of Order aggregates.
        """
        stmt = select(OrderModel).order_by(OrderModel.created_at, OrderModel.id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        if not models:
            return []

        items_by_order: dict[str, list[OrderItemModel]] = defaultdict(list)
        for item in await self._load_items([model.id for model in models]):
            items_by_order[item.order_id].append(item)

        return [self._to_domain(model, items_by_order[model.id]) for model in models]

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_model(self, order_id: str) -> OrderModel:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise NotFoundError(
                OrderError.NOT_FOUND,
                code=ErrorCode.ORDER_NOT_FOUND,
                resource_type="Order",
                resource_id=order_id,
            )

        return model

    async def _load_items(self, order_ids: list[str]) -> list[OrderItemModel]:
        stmt = (
            select(OrderItemModel)
            .where(OrderItemModel.order_id.in_(order_ids))
            .order_by(OrderItemModel.order_id, OrderItemModel.position)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    def _to_domain(self, model: OrderModel, items: list[OrderItemModel]) -> Order:
        """Convert database rows to the Order aggregate.

        Args:
            model: SQLAlchemy Order model.
            items: Item rows belonging to the order, in position order.

        Returns:
            Domain Order entity (validated on construction).
        """
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[
                OrderItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    product_id=item.product_id,
                    quantity=item.quantity,
                )
                for item in items
            ],
        )

    def _to_item_model(
        self, order_id: str, position: int, item: OrderItem
    ) -> OrderItemModel:
        model = OrderItemModel(id=item.id, order_id=order_id)
        self._update_item_model(model, position, item)
        return model

    def _update_item_model(
        self, model: OrderItemModel, position: int, item: OrderItem
    ) -> None:
        model.product_id = item.product_id
        model.name = item.name
        model.price = item.price
        model.quantity = item.quantity
        model.position = position
