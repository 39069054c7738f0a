"""In-memory repository implementations."""

from naretbox.infrastructure.repositories.memory.appointment_repository import (
    InMemoryAppointmentRepository,
)

__all__ = ["InMemoryAppointmentRepository"]
