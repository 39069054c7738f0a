"""
Interface for the Appointment Repository.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from naretbox.domain.entities.appointment import AppointmentSlot


class IAppointmentRepository(ABC):
    """Abstract base class defining the appointment slot repository interface."""

    @abstractmethod
    async def get_by_id(self, slot_id: UUID) -> AppointmentSlot | None:
        """Retrieve a slot by its ID."""
        pass

    @abstractmethod
    async def create(self, slot: AppointmentSlot) -> AppointmentSlot:
        """
        Persist a new slot.

        Raises:
            SlotUnavailableError: If the psychologist already has a slot
                starting at the same instant
            RepositoryError: For any other store failure
        """
        pass

    @abstractmethod
    async def delete(self, slot_id: UUID) -> bool:
        """Delete a slot by its ID. Returns False when nothing was deleted."""
        pass

    @abstractmethod
    async def list_by_psychologist(
        self,
        psychologist_id: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[AppointmentSlot]:
        """List a psychologist's booked and blocked slots, ordered by start time."""
        pass

    @abstractmethod
    async def list_by_patient(self, patient_id: str) -> list[AppointmentSlot]:
        """List the slots booked by a patient, ordered by start time."""
        pass


# Alias for backward compatibility
AppointmentRepository = IAppointmentRepository
