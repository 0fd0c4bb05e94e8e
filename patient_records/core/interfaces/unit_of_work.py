"""Unit of Work interface definition.

This module defines the Unit of Work pattern interface which provides
a transactional boundary for database operations across repositories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import TypeVar

from patient_records.core.interfaces.repository import IRepository

T = TypeVar("T")


class IUnitOfWork(ABC):
    """
    Unit of Work interface defining a transaction boundary for domain operations.

    A unit of work owns exactly one persistence session. Repositories obtained
    from it share that session, and :meth:`save` commits everything they
    staged as one atomic operation.
    """

    @abstractmethod
    def repo(self, entity_type: type[T]) -> IRepository[T]:
        """
        Get the repository for ``entity_type`` bound to this unit of work.

        The repository is created on first request and the same instance is
        returned for every later request within this unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self) -> int:
        """
        Commit all staged changes atomically.

        Returns:
            Number of records inserted, updated or deleted
        """
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        """Release the session and clear the repository cache."""
        raise NotImplementedError

    @abstractmethod
    async def ping(self) -> bool:
        """Whether the underlying store can be reached."""
        raise NotImplementedError

    async def __aenter__(self) -> IUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
