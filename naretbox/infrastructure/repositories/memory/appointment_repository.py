"""
In-memory implementation of the appointment slot repository.

This is primarily for testing and development environments.
For persistent storage, use SQLAlchemyAppointmentRepository.
"""

from datetime import datetime
from uuid import UUID

from naretbox.domain.entities.appointment import AppointmentSlot
from naretbox.domain.exceptions import SlotUnavailableError
from naretbox.domain.repositories.appointment_repository import IAppointmentRepository
from naretbox.domain.utils.datetime_utils import to_utc


class InMemoryAppointmentRepository(IAppointmentRepository):
    """
    In-memory implementation of the appointment slot repository.

    Applies the same uniqueness rule as the SQL table: one slot per
    psychologist per start instant.
    """

    def __init__(self, slots: list[AppointmentSlot] | None = None):
        self._slots: dict[UUID, AppointmentSlot] = {}
        for slot in slots or []:
            self._slots[slot.id] = slot

    async def get_by_id(self, slot_id: UUID) -> AppointmentSlot | None:
        return self._slots.get(slot_id)

    async def create(self, slot: AppointmentSlot) -> AppointmentSlot:
        for existing in self._slots.values():
            if existing.id == slot.id or (
                existing.psychologist_id == slot.psychologist_id
                and existing.start_time == slot.start_time
            ):
                raise SlotUnavailableError(
                    psychologist_id=slot.psychologist_id, start_time=slot.start_time
                )
        self._slots[slot.id] = slot
        return slot

    async def delete(self, slot_id: UUID) -> bool:
        return self._slots.pop(slot_id, None) is not None

    async def list_by_psychologist(
        self,
        psychologist_id: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[AppointmentSlot]:
        slots = [slot for slot in self._slots.values() if slot.psychologist_id == psychologist_id]
        if start_date is not None:
            slots = [slot for slot in slots if slot.end_time > to_utc(start_date)]
        if end_date is not None:
            slots = [slot for slot in slots if slot.start_time < to_utc(end_date)]
        return sorted(slots, key=lambda slot: slot.start_time)

    async def list_by_patient(self, patient_id: str) -> list[AppointmentSlot]:
        slots = [slot for slot in self._slots.values() if slot.patient_id == patient_id]
        return sorted(slots, key=lambda slot: slot.start_time)
