"""
Pydantic schemas for availability and appointment endpoints.

Instants travel as epoch milliseconds.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from naretbox.domain.entities.appointment import AppointmentSlot
from naretbox.domain.utils.datetime_utils import from_epoch_ms, to_epoch_ms
from naretbox.presentation.api.schemas.base import BaseModelConfig


class BookingRequest(BaseModelConfig):
    psychologist_id: str = Field(..., min_length=1, max_length=64)
    patient_id: str = Field(..., min_length=1, max_length=64)
    start_time: int = Field(..., ge=0, description="Slot start, epoch milliseconds")
    notes: str | None = None

    @property
    def start(self) -> datetime:
        return from_epoch_ms(self.start_time)


class BlockRequest(BaseModelConfig):
    psychologist_id: str = Field(..., min_length=1, max_length=64)
    start_time: int = Field(..., ge=0, description="Slot start, epoch milliseconds")
    notes: str | None = None

    @property
    def start(self) -> datetime:
        return from_epoch_ms(self.start_time)


class SlotResponse(BaseModelConfig):
    id: UUID
    psychologist_id: str
    patient_id: str | None = None
    start_time: int
    end_time: int
    status: str
    notes: str | None = None
    meet_link: str | None = None

    @classmethod
    def from_entity(cls, slot: AppointmentSlot) -> "SlotResponse":
        return cls(
            id=slot.id,
            psychologist_id=slot.psychologist_id,
            patient_id=slot.patient_id,
            start_time=to_epoch_ms(slot.start_time),
            end_time=to_epoch_ms(slot.end_time),
            status=slot.status.value,
            notes=slot.notes,
            meet_link=slot.meet_link,
        )


class AvailabilityResponse(BaseModelConfig):
    """Bookable slot starts, flat and grouped by local ISO date."""

    psychologist_id: str
    timezone: str
    slots: list[int]
    days: dict[str, list[int]]
