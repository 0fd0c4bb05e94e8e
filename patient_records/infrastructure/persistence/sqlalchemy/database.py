"""
SQLAlchemy engine and session factory construction.

The application lifespan builds one engine per process. Units of work draw
their sessions from the factory created here.
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from patient_records.core.config.settings import Settings
from patient_records.infrastructure.logging.logger import get_logger

# Imported for its side effect of registering every table on Base.metadata
from patient_records.infrastructure.persistence.sqlalchemy import models  # noqa: F401
from patient_records.infrastructure.persistence.sqlalchemy.config.base import Base

logger = get_logger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for ``settings.DATABASE_URL``.

    SQLite connections may be used from any thread; an in-memory database
    is pinned to a single connection so every session sees the same data.
    """
    engine_args: dict[str, Any] = {"echo": settings.DB_ECHO_LOG}

    if settings.is_sqlite:
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in settings.DATABASE_URL:
            engine_args["poolclass"] = StaticPool
    else:
        engine_args.update(
            {
                "pool_pre_ping": True,
                "pool_size": 5,
                "max_overflow": 10,
                "pool_recycle": 300,
            }
        )

    logger.info(f"Creating AsyncEngine for {settings.DATABASE_URL.split('://')[0]}")
    return create_async_engine(settings.DATABASE_URL, **engine_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create every registered table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created (or verified to exist)")
