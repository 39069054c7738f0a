"""
Scheduling Service

Application-level orchestration of the scheduling engine: one read from the
appointment store, one pure computation, one write per action.
"""

from collections.abc import Callable
from datetime import date, datetime
from uuid import UUID

from naretbox.core.utils.logging import get_logger
from naretbox.domain.entities.appointment import AppointmentSlot
from naretbox.domain.exceptions import (
    AppointmentNotFoundError,
    RepositoryError,
    SlotUnavailableError,
)
from naretbox.domain.repositories.appointment_repository import IAppointmentRepository
from naretbox.domain.services.scheduling_engine import (
    DEFAULT_POLICY,
    SchedulingPolicy,
    build_block,
    build_booking,
    generate_available_slots,
    group_slots_by_day,
    is_occupied,
    upcoming_for_patient,
)
from naretbox.domain.utils.datetime_utils import now_utc

logger = get_logger(__name__)


class SchedulingService:
    """
    Service for psychologist availability, patient bookings and blocks.

    The service never checks a booking against other bookings before
    inserting it; the store rejects a second slot with the same start and
    the rejection surfaces as ``SlotUnavailableError``.
    """

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        policy: SchedulingPolicy = DEFAULT_POLICY,
        clock: Callable[[], datetime] = now_utc,
    ):
        """
        Initialize the scheduling service.

        Args:
            appointment_repository: Store of booked and blocked slots
            policy: Working calendar of the practice
            clock: Source of the current instant
        """
        self.appointment_repository = appointment_repository
        self.policy = policy
        self.clock = clock

    async def get_availability(self, psychologist_id: str) -> list[datetime]:
        """Bookable slot starts of a psychologist over the booking horizon."""
        existing = await self.appointment_repository.list_by_psychologist(psychologist_id)
        available = generate_available_slots(existing, self.clock(), self.policy)
        logger.info(
            "Computed %d available slots for psychologist %s", len(available), psychologist_id
        )
        return available

    async def get_availability_by_day(self, psychologist_id: str) -> dict[date, list[datetime]]:
        available = await self.get_availability(psychologist_id)
        return group_slots_by_day(available, self.policy.timezone)

    async def get_appointment(self, slot_id: UUID) -> AppointmentSlot:
        slot = await self.appointment_repository.get_by_id(slot_id)
        if slot is None:
            raise AppointmentNotFoundError(appointment_id=str(slot_id))
        return slot

    async def list_appointments(
        self,
        psychologist_id: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[AppointmentSlot]:
        return await self.appointment_repository.list_by_psychologist(
            psychologist_id, start_date, end_date
        )

    async def is_time_occupied(self, psychologist_id: str, start_time: datetime) -> bool:
        """Whether blocking ``start_time`` would cover an existing commitment."""
        existing = await self.appointment_repository.list_by_psychologist(psychologist_id)
        return is_occupied(start_time, existing, self.policy.slot_duration)

    async def book(
        self,
        patient_id: str,
        psychologist_id: str,
        start_time: datetime,
        notes: str | None = None,
    ) -> AppointmentSlot:
        """
        Book a one-hour slot for a patient.

        Raises:
            InvalidAppointmentTimeError: If ``start_time`` is timezone-naive
            SlotUnavailableError: If the store rejects the insert
        """
        slot = build_booking(patient_id, psychologist_id, start_time, self.policy, notes=notes)
        created = await self._insert(slot)
        logger.info("Booked slot %s for psychologist %s", created.id, psychologist_id)
        return created

    async def block(
        self,
        psychologist_id: str,
        start_time: datetime,
        notes: str | None = None,
    ) -> AppointmentSlot:
        """
        Block a one-hour slot in the psychologist's own calendar.

        Raises:
            InvalidAppointmentTimeError: If ``start_time`` is timezone-naive
            SlotUnavailableError: If the store rejects the insert
        """
        slot = build_block(psychologist_id, start_time, self.policy, notes=notes)
        created = await self._insert(slot)
        logger.info("Blocked slot %s for psychologist %s", created.id, psychologist_id)
        return created

    async def cancel(self, slot_id: UUID) -> bool:
        """
        Delete a booked or blocked slot.

        Cancelling an unknown slot is not an error; the return value tells
        whether anything was deleted.
        """
        deleted = await self.appointment_repository.delete(slot_id)
        if deleted:
            logger.info("Cancelled slot %s", slot_id)
        else:
            logger.info("Cancel requested for unknown slot %s", slot_id)
        return deleted

    async def upcoming_for_patient(self, patient_id: str) -> list[AppointmentSlot]:
        slots = await self.appointment_repository.list_by_patient(patient_id)
        return upcoming_for_patient(slots, patient_id, self.clock())

    async def _insert(self, slot: AppointmentSlot) -> AppointmentSlot:
        try:
            return await self.appointment_repository.create(slot)
        except SlotUnavailableError:
            logger.warning(
                "Slot at %s for psychologist %s was taken",
                slot.start_time.isoformat(),
                slot.psychologist_id,
            )
            raise
        except RepositoryError as e:
            logger.error("Store rejected slot %s: %s", slot.id, e)
            raise SlotUnavailableError(
                psychologist_id=slot.psychologist_id, start_time=slot.start_time
            ) from e
