"""
Application Factory Module.

This module contains the factory function for creating a FastAPI application
with all necessary middleware, routers and dependencies, plus the lifespan
that owns the database engine and the gRPC server.
"""

# Standard Library Imports
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

# Third-Party Imports
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Application-Specific Imports
from patient_records.core.config.settings import Settings, get_settings
from patient_records.core.logging_config import build_logging_config, setup_logging
from patient_records.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from patient_records.infrastructure.services.system_clock import SystemClock
from patient_records.presentation.api.exception_handlers import register_exception_handlers
from patient_records.presentation.api.v1 import api_router
from patient_records.presentation.api.v1.routes import health
from patient_records.presentation.grpc_api.server import create_grpc_server
from patient_records.presentation.middleware.request_id import RequestIdMiddleware

logger = logging.getLogger(__name__)

GRPC_SHUTDOWN_GRACE_SECONDS = 5


def _initialize_sentry(settings: Settings) -> None:
    """Initializes Sentry if DSN is provided."""
    if settings.SENTRY_DSN:
        logger.info("Sentry DSN found, initializing Sentry.")
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            environment=settings.ENVIRONMENT,
            release=settings.API_VERSION,
            send_default_pii=False,
        )
    else:
        logger.info("Sentry DSN not provided, skipping Sentry initialization.")


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application.

    Startup creates the engine and session factory, creates the schema and
    starts the gRPC server when enabled. Shutdown reverses those steps.
    """
    settings: Settings = fastapi_app.state.settings

    db_engine = create_engine(settings)
    fastapi_app.state.db_engine = db_engine
    fastapi_app.state.session_factory = create_session_factory(db_engine)

    grpc_server = None
    try:
        await create_schema(db_engine)

        if settings.GRPC_ENABLED:
            grpc_server, port = create_grpc_server(
                fastapi_app.state.session_factory,
                fastapi_app.state.clock,
                f"{settings.GRPC_HOST}:{settings.GRPC_PORT}",
            )
            await grpc_server.start()
            fastapi_app.state.grpc_port = port
            logger.info(f"gRPC server listening on port {port}")

        logger.info("Application startup complete")
        yield
    finally:
        logger.info("Application is shutting down")
        if grpc_server is not None:
            await grpc_server.stop(GRPC_SHUTDOWN_GRACE_SECONDS)
            logger.info("gRPC server stopped")
        await db_engine.dispose()
        fastapi_app.state.session_factory = None
        logger.info("Database engine disposed")


def create_application(settings_override: Settings | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings_override: Override default settings (useful for testing)

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    current_settings = settings_override or get_settings()

    setup_logging(build_logging_config(current_settings.LOG_LEVEL, current_settings.LOG_JSON))
    logger.info(f"Creating application for environment: {current_settings.ENVIRONMENT}")

    _initialize_sentry(current_settings)

    app_instance = FastAPI(
        title=current_settings.API_TITLE,
        description=current_settings.API_DESCRIPTION,
        version=current_settings.API_VERSION,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app_instance.state.settings = current_settings
    app_instance.state.clock = SystemClock()

    if current_settings.CORS_ORIGINS:
        app_instance.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in current_settings.CORS_ORIGINS],
            allow_credentials=current_settings.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app_instance.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app_instance)

    app_instance.include_router(api_router, prefix=current_settings.API_V1_STR)
    app_instance.include_router(health.router, prefix="/health", tags=["Health"])

    logger.info("Application created")
    return app_instance
