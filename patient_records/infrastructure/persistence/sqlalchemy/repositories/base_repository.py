"""
SQLAlchemy repository implementation.

This module provides the generic repository used for every mapped entity.
Writes are staged on the unit of work's session and become durable only
when the unit of work saves.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from patient_records.core.interfaces.repository import IRepository
from patient_records.domain.exceptions import RepositoryError
from patient_records.infrastructure.logging.logger import get_logger
from patient_records.infrastructure.persistence.sqlalchemy.mappers.registry import (
    EntityMapping,
)

EntityT = TypeVar("EntityT")

logger = get_logger(__name__)


class SQLAlchemyRepository(IRepository[EntityT], Generic[EntityT]):
    """
    Repository implementation for SQLAlchemy ORM models.

    Provides CRUD operations and mapping between domain entities and ORM
    models through an :class:`EntityMapping`.
    """

    def __init__(
        self,
        session: AsyncSession,
        mapping: EntityMapping,
        ensure_active: Callable[[], None] | None = None,
    ):
        """
        Initialize the repository with a session and entity mapping.

        Args:
            session: SQLAlchemy async session owned by the unit of work
            mapping: ORM model and conversion functions for the entity type
            ensure_active: Called before every operation; raises once the
                owning unit of work has been closed
        """
        self._session = session
        self._mapping = mapping
        self._ensure_active = ensure_active or (lambda: None)

    @property
    def _name(self) -> str:
        return f"{self._mapping.model.__name__}Repository"

    def _error(self, operation: str, e: SQLAlchemyError) -> RepositoryError:
        logger.error(f"Error during {operation} in {self._name}: {e}")
        return RepositoryError(
            f"Failed to {operation} entity",
            repository=self._name,
            operation=operation,
            original_exception=e,
        )

    async def get(self, entity_id: UUID) -> EntityT | None:
        """
        Get an entity by its ID.

        Raises:
            RepositoryError: If database operation fails
        """
        self._ensure_active()
        try:
            model = await self._session.get(self._mapping.model, entity_id)
        except SQLAlchemyError as e:
            raise self._error("get", e) from e
        if model is None:
            return None
        return self._mapping.to_domain(model)

    async def get_all(self) -> list[EntityT]:
        """
        Get all entities.

        Raises:
            RepositoryError: If database operation fails
        """
        self._ensure_active()
        try:
            result = await self._session.execute(select(self._mapping.model))
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._error("get_all", e) from e
        return [self._mapping.to_domain(model) for model in models]

    async def add(self, entity: EntityT) -> None:
        """
        Stage an insert of ``entity``.

        Raises:
            RepositoryError: If the session rejects the object
        """
        self._ensure_active()
        try:
            self._session.add(self._mapping.to_model(entity))
        except SQLAlchemyError as e:
            raise self._error("add", e) from e

    async def update(self, entity: EntityT) -> None:
        """
        Stage a modification of an existing entity.

        The stored row is loaded by primary key and its columns are
        overwritten with the entity's values, so the entity does not need
        to have been loaded through this repository.

        Raises:
            RepositoryError: If no row with the entity's ID is stored, or
                the database operation fails
        """
        self._ensure_active()
        entity_id: Any = getattr(entity, "id")
        try:
            model = await self._session.get(self._mapping.model, entity_id)
        except SQLAlchemyError as e:
            raise self._error("update", e) from e
        if model is None:
            logger.error(f"{self._name}: nothing to update for id {entity_id}")
            raise RepositoryError(
                f"Entity {entity_id} does not exist",
                repository=self._name,
                operation="update",
            )

        changes = self._mapping.to_model(entity)
        for column in inspect(self._mapping.model).column_attrs:
            setattr(model, column.key, getattr(changes, column.key))

    async def remove(self, entity: EntityT) -> None:
        """
        Stage a deletion of ``entity``.

        Removing an entity that is not stored is a no-op.
        """
        self._ensure_active()
        entity_id: Any = getattr(entity, "id")
        try:
            model = await self._session.get(self._mapping.model, entity_id)
            if model is None:
                logger.warning(f"{self._name}: nothing to remove for id {entity_id}")
                return
            await self._session.delete(model)
        except SQLAlchemyError as e:
            raise self._error("remove", e) from e
