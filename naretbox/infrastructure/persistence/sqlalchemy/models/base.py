"""Base SQLAlchemy models module.

This module defines the declarative base class (Base) used for all ORM
models in this application, plus the common timestamp mixin.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

metadata = MetaData()


class Base(DeclarativeBase, AsyncAttrs):
    """SQLAlchemy 2.0 declarative base with async support."""

    metadata = metadata


class TimestampMixin:
    """Mixin adding a server-side creation timestamp."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


__all__ = ["Base", "TimestampMixin", "metadata"]
