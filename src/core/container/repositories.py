"""Repository dependency factories.

Per-unit-of-work repository instances for domain entity persistence.
Repositories created from the same session share its transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)


# ============================================================================
# Repository Factories
# ============================================================================


def get_customer_repository(session: AsyncSession) -> CustomerRepository:
    """Get customer repository bound to session.

    Args:
        session: Database session for the unit of work.

    Returns:
        CustomerRepository instance.

    Usage:
        async with get_database().transaction() as session:
            customer_repo = get_customer_repository(session)
            customer = await customer_repo.find("123")
    """
    return CustomerRepository(session=session)


def get_product_repository(session: AsyncSession) -> ProductRepository:
    """Get product repository bound to session."""
    return ProductRepository(session=session)


def get_order_repository(session: AsyncSession) -> OrderRepository:
    """Get order repository bound to session."""
    return OrderRepository(session=session)
