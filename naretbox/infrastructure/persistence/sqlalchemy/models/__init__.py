"""SQLAlchemy ORM models."""

from naretbox.infrastructure.persistence.sqlalchemy.models.appointment import AppointmentModel
from naretbox.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin

__all__ = ["AppointmentModel", "Base", "TimestampMixin"]
