"""
Appointment slot entity.

A slot is a one-hour commitment in a psychologist's calendar: either booked
by a patient or blocked by the psychologist. Slots are never mutated in
place; cancelling deletes the slot and rebooking creates a fresh one.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from naretbox.domain.exceptions import (
    InvalidAppointmentStateError,
    InvalidAppointmentTimeError,
)
from naretbox.domain.utils.datetime_utils import from_epoch_ms, to_epoch_ms, to_utc


class SlotStatus(str, Enum):
    """Why a time range is unavailable."""

    BOOKED = "booked"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class AppointmentSlot:
    """Immutable domain model for an occupied time range."""

    psychologist_id: str
    start_time: datetime
    end_time: datetime
    status: SlotStatus
    patient_id: str | None = None
    notes: str | None = None
    meet_link: str | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        """Validate invariants and normalise instants to UTC."""
        if self.start_time.tzinfo is None or self.end_time.tzinfo is None:
            raise InvalidAppointmentTimeError("Appointment times must be timezone-aware.")
        if self.end_time <= self.start_time:
            raise InvalidAppointmentTimeError("Appointment end time must be after start time.")

        if self.status is SlotStatus.BOOKED and not self.patient_id:
            raise InvalidAppointmentStateError("A booked slot requires a patient", self.status.value)
        if self.status is SlotStatus.BLOCKED and self.patient_id:
            raise InvalidAppointmentStateError("A blocked slot cannot have a patient", self.status.value)

        object.__setattr__(self, "start_time", to_utc(self.start_time))
        object.__setattr__(self, "end_time", to_utc(self.end_time))

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open interval test: ``[start, end)`` against ``[self.start, self.end)``."""
        return start < self.end_time and end > self.start_time

    def to_dict(self) -> dict[str, Any]:
        """Return the record shape exchanged with the store (epoch milliseconds)."""
        record: dict[str, Any] = {
            "id": str(self.id),
            "psychologistId": self.psychologist_id,
            "startTime": to_epoch_ms(self.start_time),
            "endTime": to_epoch_ms(self.end_time),
            "status": self.status.value,
        }
        if self.patient_id is not None:
            record["patientId"] = self.patient_id
        if self.notes is not None:
            record["notes"] = self.notes
        if self.meet_link is not None:
            record["meetLink"] = self.meet_link
        return record

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppointmentSlot":
        """Create a slot from a store record."""
        kwargs: dict[str, Any] = {
            "psychologist_id": str(data["psychologistId"]),
            "start_time": from_epoch_ms(int(data["startTime"])),
            "end_time": from_epoch_ms(int(data["endTime"])),
            "status": SlotStatus(data["status"]),
            "patient_id": data.get("patientId"),
            "notes": data.get("notes"),
            "meet_link": data.get("meetLink"),
        }
        if data.get("id"):
            kwargs["id"] = UUID(str(data["id"]))
        return cls(**kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return (
            f"AppointmentSlot<{self.id}> psych={self.psychologist_id} status={self.status.value} "
            f"{self.start_time.isoformat()}–{self.end_time.isoformat()}"
        )
