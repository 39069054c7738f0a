"""Repository interfaces for the domain layer."""

from naretbox.domain.repositories.appointment_repository import (
    AppointmentRepository,
    IAppointmentRepository,
)

__all__ = ["AppointmentRepository", "IAppointmentRepository"]
