"""Repository port interface."""

from typing import Optional, Protocol, TypeVar

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT", contravariant=True)


class RepositoryPort(Protocol[EntityT, IdT]):
    """
    Repository interface for one aggregate or entity type.

    Repositories separate data access from domain logic. Concrete adapters
    (SQL, document store, in-memory for tests) implement this protocol
    structurally.
    """

    async def add(self, entity: EntityT) -> EntityT:
        """
        Add a new entity to the repository.

        Args:
            entity: Entity to add

        Returns:
            Created entity with updated metadata
        """
        ...

    async def get_by_id(self, entity_id: IdT) -> Optional[EntityT]:
        """
        Retrieve entity by ID.

        Args:
            entity_id: Entity's unique identifier

        Returns:
            Entity if found, None otherwise
        """
        ...

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[EntityT]:
        """
        List entities with pagination.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of entities
        """
        ...

    async def update(self, entity: EntityT) -> EntityT:
        """
        Update existing entity.

        Args:
            entity: Entity with updated data

        Returns:
            Updated entity
        """
        ...

    async def delete(self, entity_id: IdT) -> None:
        """
        Delete entity.

        Args:
            entity_id: Entity's unique identifier
        """
        ...
