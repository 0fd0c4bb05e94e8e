"""
Global test configuration for the entire test suite.

Provides a fixed clock, test settings, an in-memory SQLite database and an
application wired to both.
"""

from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from patient_records.app_factory import create_application
from patient_records.application.dtos.patient_dtos import CreatePatientDto
from patient_records.core.config.settings import Settings
from patient_records.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from patient_records.tests.helpers import FixedClock


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def valid_dto() -> CreatePatientDto:
    return CreatePatientDto(
        first_name="John",
        last_name="Doe",
        email="JOHN@EXAMPLE.COM",
        date_of_birth=date(1990, 5, 15),
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings that keep everything in-process."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        GRPC_ENABLED=False,
        SENTRY_DSN=None,
        LOG_LEVEL="WARNING",
        _env_file=None,
    )


@pytest_asyncio.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(test_settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(db_engine)


@pytest.fixture
def app(
    test_settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
    fixed_clock: FixedClock,
) -> FastAPI:
    """
    Application wired to the in-memory database.

    ASGITransport does not run the lifespan, so the state it would set up is
    attached here directly.
    """
    application = create_application(settings_override=test_settings)
    application.state.session_factory = session_factory
    application.state.clock = fixed_clock
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
