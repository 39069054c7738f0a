"""SQLAlchemy repository implementations."""

from naretbox.infrastructure.persistence.sqlalchemy.repositories.appointment_repository import (
    SQLAlchemyAppointmentRepository,
)

__all__ = ["SQLAlchemyAppointmentRepository"]
