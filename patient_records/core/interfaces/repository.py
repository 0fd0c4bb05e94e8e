"""
Base repository interface definition.

This module defines the generic repository contract following the
Repository Pattern from Domain-Driven Design. Mutating operations only
stage changes; nothing is durable until the owning unit of work saves.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

# Generic type variable for domain entities
T = TypeVar("T")


class IRepository(Generic[T], ABC):
    """
    Generic CRUD accessor for one entity type.

    There is deliberately no query language, pagination or filtering.
    """

    @abstractmethod
    async def get(self, entity_id: UUID) -> T | None:
        """
        Retrieve an entity by its unique ID.

        Args:
            entity_id: The unique identifier of the entity

        Returns:
            The entity if found, None otherwise
        """
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> list[T]:
        """
        Retrieve every entity of this type.

        Returns:
            List of entities, empty when the store holds none
        """
        raise NotImplementedError

    @abstractmethod
    async def add(self, entity: T) -> None:
        """
        Stage an insert of ``entity``.

        Args:
            entity: The entity to insert on the next save
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, entity: T) -> None:
        """
        Stage a modification of an existing entity.

        Args:
            entity: The entity carrying the new field values
        """
        raise NotImplementedError

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """
        Stage a deletion of ``entity``.

        Args:
            entity: The entity to delete on the next save
        """
        raise NotImplementedError
