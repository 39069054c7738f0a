"""
SQLAlchemy model for AppointmentSlot entity.

This module defines the SQLAlchemy ORM model for booked and blocked slots,
mapping the domain entity to the database schema.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text, UniqueConstraint, Uuid
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.orm import Mapped, mapped_column

from naretbox.domain.entities.appointment import SlotStatus
from naretbox.domain.utils.datetime_utils import to_utc
from naretbox.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from naretbox.domain.entities.appointment import AppointmentSlot


class AppointmentModel(Base, TimestampMixin):
    """
    SQLAlchemy model for the AppointmentSlot entity.

    This model maps to the 'appointment_slots' table. A psychologist can hold
    at most one slot per start instant; a second insert for the same start
    violates ``uq_appointment_slots_psychologist_start``.
    """

    __tablename__ = "appointment_slots"
    __table_args__ = (
        UniqueConstraint(
            "psychologist_id", "start_time", name="uq_appointment_slots_psychologist_start"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(), primary_key=True, default=uuid.uuid4)
    psychologist_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    patient_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[SlotStatus] = mapped_column(
        SQLAlchemyEnum(
            SlotStatus,
            name="slot_status",
            native_enum=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    meet_link: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """Return string representation of the slot."""
        return (
            f"<AppointmentModel(id={self.id}, psychologist_id={self.psychologist_id}, "
            f"start_time={self.start_time}, status={self.status})>"
        )

    @classmethod
    def from_domain(cls, slot: "AppointmentSlot") -> "AppointmentModel":
        """
        Create a SQLAlchemy model instance from a domain entity.

        Args:
            slot: Domain AppointmentSlot entity

        Returns:
            AppointmentModel: SQLAlchemy model instance
        """
        return cls(
            id=slot.id,
            psychologist_id=slot.psychologist_id,
            patient_id=slot.patient_id,
            start_time=slot.start_time,
            end_time=slot.end_time,
            status=slot.status,
            notes=slot.notes,
            meet_link=slot.meet_link,
        )

    def to_domain(self) -> "AppointmentSlot":
        """
        Convert SQLAlchemy model instance to domain entity.

        SQLite returns naive datetimes; they were stored as UTC.
        """
        from naretbox.domain.entities.appointment import AppointmentSlot

        return AppointmentSlot(
            id=self.id,
            psychologist_id=self.psychologist_id,
            patient_id=self.patient_id,
            start_time=to_utc(self.start_time),
            end_time=to_utc(self.end_time),
            status=SlotStatus(self.status),
            notes=self.notes,
            meet_link=self.meet_link,
        )
