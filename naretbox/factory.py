"""
Application Factory Module.

This module contains the factory function for creating a FastAPI application
with its database lifecycle, exception handlers and routers.
"""

# Standard Library Imports
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

# Third-Party Imports
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from starlette.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

# Application-Specific Imports
from naretbox.core.config import Settings
from naretbox.core.config import get_settings as global_get_settings
from naretbox.core.logging_config import setup_logging
from naretbox.infrastructure.persistence.sqlalchemy.models import Base
from naretbox.presentation.api.v1.api_router import api_v1_router

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # One shared connection so every session sees the same in-memory database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manages application startup and shutdown events.
    Creates the database engine, the tables and the session factory.
    """
    current_settings: Settings = fastapi_app.state.settings
    database_url = str(current_settings.ASYNC_DATABASE_URL)
    logger.info("LIFESPAN_DB_INIT_START: Connecting to DB: %s", database_url)

    db_engine = create_async_engine(
        database_url, echo=current_settings.DB_ECHO_LOG, **_engine_options(database_url)
    )
    try:
        async with db_engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

        fastapi_app.state.db_engine = db_engine
        fastapi_app.state.actual_session_factory = async_sessionmaker(
            bind=db_engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.info("LIFESPAN_DB_INIT_SUCCESS: DB session factory created.")

        yield  # Application runs here

    finally:
        logger.info("LIFESPAN_SHUTDOWN_START: Cleaning up resources...")
        await db_engine.dispose()
        fastapi_app.state.actual_session_factory = None
        logger.info("LIFESPAN_COMPLETE: DB engine disposed.")


def create_application(settings_override: Settings | None = None) -> FastAPI:
    """
    Application factory function to create and configure a FastAPI application instance.

    Args:
        settings_override: Optional `Settings` object to override global settings.

    Returns:
        A configured FastAPI application instance.
    """
    current_settings: Settings = settings_override if settings_override else global_get_settings()

    setup_logging(current_settings.LOG_LEVEL)
    logger.info(
        "CREATE_APPLICATION_SETTINGS_RESOLVED: env=%s log_level=%s",
        current_settings.ENVIRONMENT,
        current_settings.LOG_LEVEL,
    )

    app_instance = FastAPI(
        title=current_settings.API_TITLE,
        description=current_settings.API_DESCRIPTION,
        version=current_settings.API_VERSION,
        openapi_url=f"{current_settings.API_V1_STR}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app_instance.state.settings = current_settings

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler for unhandled errors."""
        logger.error(
            "Unhandled exception: %s",
            exc,
            exc_info=True,
            extra={
                "url": str(request.url),
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected internal server error occurred."},
        )

    app_instance.include_router(api_v1_router, prefix=current_settings.API_V1_STR)
    logger.info("API v1 router included at prefix: %s", current_settings.API_V1_STR)

    @app_instance.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Root endpoint for basic health check and application information."""
        return {
            "status": "healthy",
            "environment": current_settings.ENVIRONMENT,
            "version": current_settings.API_VERSION,
        }

    return app_instance
