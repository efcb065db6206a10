"""Repository protocols (ports) for domain layer.

This module defines the generic repository interface that every aggregate
repository follows. These are protocols (ports) that will be implemented by
the infrastructure layer (adapters).

Following hexagonal architecture:
- Domain defines what it needs (protocols/ports)
- Infrastructure provides implementations (adapters)
- Domain has no knowledge of how data is stored
"""

from typing import Protocol, TypeVar

# Generic type for entities
T = TypeVar("T")


class RepositoryInterface(Protocol[T]):
    """Base repository protocol defining common operations.

    Entities cross this boundary as flat fields with no behavior attached;
    adapters rebuild full entities (running their validation) on the way
    back.
    """

    async def create(self, entity: T) -> None:
        """Persist a new entity.

        Args:
            entity: The domain entity to store.
        """
        ...

    async def update(self, entity: T) -> None:
        """Persist changes to an existing entity.

        Args:
            entity: The domain entity to store.
        """
        ...

    async def find(self, entity_id: str) -> T:
        """Find an entity by its ID.

        Args:
            entity_id: Identifier of the entity to find.

        Returns:
            The rebuilt entity.

        Raises:
            NotFoundError: If no entity has that ID.
        """
        ...

    async def find_all(self) -> list[T]:
        """Return every stored entity.

        Returns:
            List of entities (possibly empty).
        """
        ...
