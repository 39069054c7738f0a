"""
Scheduling Engine

Computes bookable one-hour slots from a psychologist's existing commitments
and builds the records for booking and blocking.

The engine performs no I/O and no locking. Availability is the only place
where overlap is checked; booking is a plain insert and a race between two
patients on the same slot is resolved by the store's uniqueness constraint.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo

from naretbox.domain.entities.appointment import AppointmentSlot, SlotStatus
from naretbox.domain.utils.datetime_utils import UTC, to_utc

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class SchedulingPolicy:
    """
    Working calendar of the practice.

    Defaults: 09:00-18:00 local, one-hour slots, the next 14 calendar days,
    weekends closed.
    """

    timezone: tzinfo = UTC
    workday_start_hour: int = 9
    workday_end_hour: int = 18
    slot_duration_minutes: int = 60
    horizon_days: int = 14
    closed_weekdays: frozenset[int] = field(default_factory=lambda: frozenset({SATURDAY, SUNDAY}))

    @property
    def slot_duration(self) -> timedelta:
        return timedelta(minutes=self.slot_duration_minutes)

    def candidate_days(self, today: date) -> list[date]:
        """Days ``today + 1`` .. ``today + horizon_days`` that are open; today is never offered."""
        days = (today + timedelta(days=offset) for offset in range(1, self.horizon_days + 1))
        return [day for day in days if day.weekday() not in self.closed_weekdays]

    def candidate_starts(self, day: date) -> list[datetime]:
        """Slot start instants of *day*, in UTC, from the opening hour up to the last full slot."""
        opening = datetime.combine(day, time(self.workday_start_hour))
        closing = datetime.combine(day, time()) + timedelta(hours=self.workday_end_hour)

        starts = []
        local_start = opening
        while local_start + self.slot_duration <= closing:
            # Wall-clock arithmetic on naive values, zone attached afterwards
            starts.append(local_start.replace(tzinfo=self.timezone).astimezone(UTC))
            local_start += self.slot_duration
        return starts


DEFAULT_POLICY = SchedulingPolicy()


def is_occupied(
    start: datetime,
    existing: Iterable[AppointmentSlot],
    duration: timedelta = DEFAULT_POLICY.slot_duration,
) -> bool:
    """
    Whether ``[start, start + duration)`` overlaps any existing slot.

    Booked and blocked slots occupy time identically.
    """
    end = start + duration
    return any(slot.overlaps(start, end) for slot in existing)


def generate_available_slots(
    existing: Iterable[AppointmentSlot],
    now: datetime,
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> list[datetime]:
    """
    List every bookable slot start over the policy horizon.

    Args:
        existing: All booked and blocked slots of one psychologist
        now: Reference instant; its local date is "today"
        policy: Working calendar

    Returns:
        Chronologically ordered, timezone-aware UTC start instants
    """
    existing = list(existing)
    today = to_utc(now).astimezone(policy.timezone).date()

    available = []
    for day in policy.candidate_days(today):
        for start in policy.candidate_starts(day):
            if not is_occupied(start, existing, policy.slot_duration):
                available.append(start)

    logger.debug(
        "Generated %d available slots from %d existing commitments", len(available), len(existing)
    )
    return available


def group_slots_by_day(
    starts: Iterable[datetime], timezone: tzinfo = UTC
) -> dict[date, list[datetime]]:
    """Group slot starts by local calendar day, keeping each day chronological."""
    grouped: dict[date, list[datetime]] = {}
    for start in sorted(starts):
        grouped.setdefault(start.astimezone(timezone).date(), []).append(start)
    return grouped


def build_booking(
    patient_id: str,
    psychologist_id: str,
    start_time: datetime,
    policy: SchedulingPolicy = DEFAULT_POLICY,
    notes: str | None = None,
) -> AppointmentSlot:
    """Build a patient booking; no re-validation against other bookings."""
    return AppointmentSlot(
        psychologist_id=psychologist_id,
        patient_id=patient_id,
        start_time=start_time,
        end_time=start_time + policy.slot_duration,
        status=SlotStatus.BOOKED,
        notes=notes,
    )


def build_block(
    psychologist_id: str,
    start_time: datetime,
    policy: SchedulingPolicy = DEFAULT_POLICY,
    notes: str | None = None,
) -> AppointmentSlot:
    """
    Build a psychologist-initiated block.

    Blocking an occupied time is not rejected here; asking for confirmation
    is up to the caller (see ``is_occupied``).
    """
    return AppointmentSlot(
        psychologist_id=psychologist_id,
        start_time=start_time,
        end_time=start_time + policy.slot_duration,
        status=SlotStatus.BLOCKED,
        notes=notes,
    )


def upcoming_for_patient(
    slots: Iterable[AppointmentSlot], patient_id: str, now: datetime
) -> list[AppointmentSlot]:
    """A patient's booked slots that have not ended yet, soonest first."""
    now = to_utc(now)
    mine = [
        slot
        for slot in slots
        if slot.status is SlotStatus.BOOKED and slot.patient_id == patient_id and slot.end_time > now
    ]
    return sorted(mine, key=lambda slot: slot.start_time)
