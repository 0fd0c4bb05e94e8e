"""
Database dependency providers.

Each request gets its own unit of work, opened from the session factory the
application lifespan stores on ``app.state`` and closed when the response
has been produced.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from patient_records.core.interfaces.unit_of_work import IUnitOfWork
from patient_records.infrastructure.persistence.sqlalchemy.unit_of_work.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

logger = logging.getLogger(__name__)


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """
    Get the async session factory from the FastAPI app state.

    Raises:
        RuntimeError: If the database has not been initialized
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        logger.error("Database session factory not found on app.state")
        raise RuntimeError("Database not initialized. Session factory missing from app state.")
    return session_factory


async def get_unit_of_work(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[IUnitOfWork, None]:
    """
    Provide a request-scoped unit of work.

    Yields:
        IUnitOfWork: Closed after the request; unsaved changes are discarded
    """
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        yield uow


UnitOfWorkDep = Annotated[IUnitOfWork, Depends(get_unit_of_work)]
