"""
Database dependencies for API routes.

This module provides FastAPI dependency functions for database access. The
session factory is created by the application lifespan and stored on
``app.state``.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


async def get_session_factory_from_request_state(
    request: Request,
) -> async_sessionmaker[AsyncSession]:
    factory = getattr(request.app.state, "actual_session_factory", None)
    if factory is None:
        logger.error("actual_session_factory not found on app.state")
        raise RuntimeError("actual_session_factory not found on app.state")
    return factory


async def get_db_session(
    factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory_from_request_state),
) -> AsyncGenerator[AsyncSession, None]:
    """Yields an SQLAlchemy AsyncSession using the factory from application state."""
    async with factory() as session:
        logger.debug("Session %s created", id(session))
        yield session
