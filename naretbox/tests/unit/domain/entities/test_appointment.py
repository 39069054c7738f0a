"""
Tests for the AppointmentSlot entity.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID
from zoneinfo import ZoneInfo

import pytest

from naretbox.domain.entities.appointment import AppointmentSlot, SlotStatus
from naretbox.domain.exceptions import (
    InvalidAppointmentStateError,
    InvalidAppointmentTimeError,
)
from naretbox.tests.utils import PATIENT_ID, PSYCHOLOGIST_ID, make_slot

START = datetime(2025, 1, 16, 10, 0, tzinfo=timezone.utc)
END = START + timedelta(hours=1)


def test_booked_slot_requires_patient():
    with pytest.raises(InvalidAppointmentStateError):
        AppointmentSlot(PSYCHOLOGIST_ID, START, END, SlotStatus.BOOKED)


def test_blocked_slot_rejects_patient():
    with pytest.raises(InvalidAppointmentStateError):
        AppointmentSlot(PSYCHOLOGIST_ID, START, END, SlotStatus.BLOCKED, patient_id=PATIENT_ID)


def test_end_must_follow_start():
    with pytest.raises(InvalidAppointmentTimeError):
        make_slot(START, START)


def test_naive_times_are_rejected():
    with pytest.raises(InvalidAppointmentTimeError):
        make_slot(START.replace(tzinfo=None), END.replace(tzinfo=None))


def test_times_are_normalised_to_utc():
    madrid = ZoneInfo("Europe/Madrid")
    slot = make_slot(datetime(2025, 1, 16, 11, 0, tzinfo=madrid), datetime(2025, 1, 16, 12, 0, tzinfo=madrid))

    assert slot.start_time == START
    assert slot.start_time.utcoffset() == timedelta(0)
    assert slot.duration == timedelta(hours=1)


@pytest.mark.parametrize(
    "offset_start, offset_end, expected",
    [
        (timedelta(minutes=-60), timedelta(0), False),
        (timedelta(minutes=-30), timedelta(minutes=30), True),
        (timedelta(0), timedelta(hours=1), True),
        (timedelta(minutes=59), timedelta(minutes=90), True),
        (timedelta(hours=1), timedelta(hours=2), False),
    ],
)
def test_overlap_is_half_open(offset_start, offset_end, expected):
    slot = make_slot(START, END)

    assert slot.overlaps(START + offset_start, START + offset_end) is expected


def test_record_round_trip():
    slot = make_slot(START, END)

    record = slot.to_dict()

    assert record == {
        "id": str(slot.id),
        "psychologistId": PSYCHOLOGIST_ID,
        "patientId": PATIENT_ID,
        "startTime": 1737021600000,
        "endTime": 1737025200000,
        "status": "booked",
    }
    assert AppointmentSlot.from_dict(record) == slot


def test_blocked_record_has_no_patient():
    record = make_slot(START, END, status=SlotStatus.BLOCKED).to_dict()

    assert "patientId" not in record
    assert record["status"] == "blocked"


def test_from_dict_generates_id_when_missing():
    slot = AppointmentSlot.from_dict(
        {
            "psychologistId": PSYCHOLOGIST_ID,
            "startTime": 1737021600000,
            "endTime": 1737025200000,
            "status": "blocked",
        }
    )

    assert isinstance(slot.id, UUID)
    assert slot.start_time == START
