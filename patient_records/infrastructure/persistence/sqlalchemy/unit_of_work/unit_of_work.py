"""
Async SQLAlchemy Unit of Work implementation.

One unit of work owns one ``AsyncSession``. Repositories it hands out share
that session, and :meth:`SQLAlchemyUnitOfWork.save` commits everything they
staged in a single transaction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from patient_records.core.interfaces.unit_of_work import IUnitOfWork
from patient_records.domain.exceptions import (
    MappingNotRegisteredError,
    RepositoryError,
    UnitOfWorkDisposedError,
)
from patient_records.infrastructure.logging.logger import get_logger
from patient_records.infrastructure.persistence.sqlalchemy.mappers.registry import (
    DEFAULT_MAPPINGS,
    EntityMapping,
)
from patient_records.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    SQLAlchemyRepository,
)

T = TypeVar("T")

logger = get_logger(__name__)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """
    Async SQLAlchemy Unit of Work.

    The session is opened lazily on first use. Leaving an ``async with``
    block closes it without committing, so anything not saved is rolled
    back.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        mappings: Mapping[type, EntityMapping] | None = None,
    ):
        """
        Initialize the Unit of Work.

        Args:
            session_factory: Async SQLAlchemy session factory
            mappings: Entity type to storage mapping; defaults to every
                registered entity
        """
        self.session_factory = session_factory
        self._mappings = mappings if mappings is not None else DEFAULT_MAPPINGS
        self._session: AsyncSession | None = None
        self._repositories: dict[type, SQLAlchemyRepository[Any]] = {}
        self._disposed = False

    @property
    def session(self) -> AsyncSession:
        """
        The session owned by this unit of work.

        Raises:
            UnitOfWorkDisposedError: If the unit of work has been closed
        """
        self._ensure_active()
        if self._session is None:
            self._session = self.session_factory()
            logger.debug(f"UoW {id(self)}: session {id(self._session)} opened")
        return self._session

    def _ensure_active(self) -> None:
        if self._disposed:
            raise UnitOfWorkDisposedError()

    def repo(self, entity_type: type[T]) -> SQLAlchemyRepository[T]:
        """
        Get the repository for ``entity_type``, creating it on first request.

        Raises:
            UnitOfWorkDisposedError: If the unit of work has been closed
            MappingNotRegisteredError: If ``entity_type`` has no storage mapping
        """
        self._ensure_active()
        repository = self._repositories.get(entity_type)
        if repository is None:
            mapping = self._mappings.get(entity_type)
            if mapping is None:
                raise MappingNotRegisteredError(entity_type)
            repository = SQLAlchemyRepository(self.session, mapping, self._ensure_active)
            self._repositories[entity_type] = repository
        return repository

    def _pending_count(self, session: AsyncSession) -> int:
        modified = [obj for obj in session.dirty if session.is_modified(obj)]
        return len(session.new) + len(modified) + len(session.deleted)

    async def save(self) -> int:
        """
        Commit all changes staged through this unit of work's repositories.

        Returns:
            Number of records inserted, updated or deleted

        Raises:
            UnitOfWorkDisposedError: If the unit of work has been closed
            RepositoryError: If the store rejects the commit; the session is
                rolled back first
        """
        session = self.session
        affected = self._pending_count(session)
        try:
            await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error during commit, rolling back: {e}")
            await session.rollback()
            raise RepositoryError(
                "Failed to save changes",
                operation="save",
                original_exception=e,
            ) from e
        logger.debug(f"UoW {id(self)}: committed {affected} change(s)")
        return affected

    async def close(self) -> None:
        """Close the session and clear the repository cache. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        self._repositories.clear()
        if self._session is not None:
            session, self._session = self._session, None
            await session.close()
            logger.debug(f"UoW {id(self)}: session {id(session)} closed")

    async def ping(self) -> bool:
        """Run a trivial query to check that the store answers."""
        try:
            await self.session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        self._ensure_active()
        return self
