"""Generic identifier-keyed repository port."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Port interface for a store over a single entity type keyed by int id."""

    @abstractmethod
    async def get(self, entity_id: int) -> Optional[T]:
        """
        Get an entity by identifier.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity, or None if not found
        """
        pass

    @abstractmethod
    async def list(self) -> list[T]:
        """
        List all entities ordered by identifier.

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """
        Insert or overwrite an entity.

        An entity without identifier gets one assigned by the store.

        Args:
            entity: Entity to save

        Returns:
            Stored entity carrying its identifier
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """
        Delete an entity.

        Args:
            entity_id: Entity identifier

        Returns:
            True if an entity was removed
        """
        pass
