"""
Tests for the Scheduling Engine.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from naretbox.domain.entities.appointment import SlotStatus
from naretbox.domain.services.scheduling_engine import (
    SchedulingPolicy,
    build_block,
    build_booking,
    generate_available_slots,
    group_slots_by_day,
    is_occupied,
    upcoming_for_patient,
)
from naretbox.tests.utils import PATIENT_ID, PSYCHOLOGIST_ID, make_slot

UTC = timezone.utc


def at(day: int, hour: int, minute: int = 0, month: int = 1) -> datetime:
    return datetime(2025, month, day, hour, minute, tzinfo=UTC)


class TestGenerateAvailableSlots:
    def test_empty_calendar_from_wednesday(self, wednesday_noon, utc_policy):
        slots = generate_available_slots([], wednesday_noon, utc_policy)

        assert len(slots) == 90
        assert slots == sorted(slots)
        assert all(slot.date() != wednesday_noon.date() for slot in slots)
        assert all(slot.weekday() < 5 for slot in slots)
        assert {slot.hour for slot in slots} == set(range(9, 18))
        assert slots[0] == at(16, 9)
        assert slots[-1] == at(29, 17)

    def test_booked_slot_excludes_only_its_hour(self, wednesday_noon, utc_policy):
        existing = [make_slot(at(16, 10), at(16, 11))]

        slots = generate_available_slots(existing, wednesday_noon, utc_policy)

        tomorrow = [slot for slot in slots if slot.date() == date(2025, 1, 16)]
        assert len(slots) == 89
        assert at(16, 10) not in slots
        assert [slot.hour for slot in tomorrow] == [9, 11, 12, 13, 14, 15, 16, 17]

    def test_blocked_slot_excludes_like_booked(self, wednesday_noon, utc_policy):
        booked = [make_slot(at(16, 10), at(16, 11), status=SlotStatus.BOOKED)]
        blocked = [make_slot(at(16, 10), at(16, 11), status=SlotStatus.BLOCKED)]

        assert generate_available_slots(booked, wednesday_noon, utc_policy) == (
            generate_available_slots(blocked, wednesday_noon, utc_policy)
        )

    def test_misaligned_slot_excludes_both_hours_it_touches(self, wednesday_noon, utc_policy):
        existing = [make_slot(at(16, 10, 30), at(16, 11, 30))]

        slots = generate_available_slots(existing, wednesday_noon, utc_policy)

        assert at(16, 10) not in slots
        assert at(16, 11) not in slots
        assert at(16, 9) in slots
        assert at(16, 12) in slots

    def test_adjacent_slot_does_not_overlap(self, wednesday_noon, utc_policy):
        existing = [make_slot(at(16, 8), at(16, 9))]

        assert len(generate_available_slots(existing, wednesday_noon, utc_policy)) == 90

    def test_slots_outside_window_are_irrelevant(self, wednesday_noon, utc_policy):
        existing = [
            make_slot(at(15, 14), at(15, 15)),  # today
            make_slot(at(18, 10), at(18, 11)),  # Saturday
            make_slot(at(30, 10), at(30, 11)),  # beyond horizon
        ]

        assert len(generate_available_slots(existing, wednesday_noon, utc_policy)) == 90

    def test_today_is_never_offered_even_early_morning(self, utc_policy):
        early = at(15, 0, 1)

        slots = generate_available_slots([], early, utc_policy)

        assert slots[0] == at(16, 9)

    def test_cancel_then_regenerate_restores_candidate(self, wednesday_noon, utc_policy):
        original = generate_available_slots([], wednesday_noon, utc_policy)
        existing = [make_slot(at(20, 15), at(20, 16))]

        constrained = generate_available_slots(existing, wednesday_noon, utc_policy)
        existing.clear()
        restored = generate_available_slots(existing, wednesday_noon, utc_policy)

        assert at(20, 15) not in constrained
        assert restored == original

    def test_local_working_hours_are_converted_to_utc(self, wednesday_noon, madrid_policy):
        slots = generate_available_slots([], wednesday_noon, madrid_policy)

        # Madrid is UTC+1 in January
        assert slots[0] == at(16, 8)
        assert slots[8] == at(16, 16)
        assert all(slot.tzinfo == UTC for slot in slots)

    def test_daylight_saving_change_keeps_local_hours(self, madrid_policy):
        now = datetime(2025, 3, 27, 12, 0, tzinfo=UTC)

        slots = generate_available_slots([], now, madrid_policy)

        assert slots[0] == at(28, 8, month=3)
        monday = [slot for slot in slots if slot.date() == date(2025, 3, 31)]
        assert monday[0] == at(31, 7, month=3)
        assert len(monday) == 9

    def test_today_follows_local_calendar(self, madrid_policy):
        # 23:30 UTC Wednesday is already Thursday in Madrid
        late = at(15, 23, 30)

        slots = generate_available_slots([], late, madrid_policy)

        assert slots[0] == at(17, 8)

    def test_policy_controls_window(self, wednesday_noon):
        policy = SchedulingPolicy(
            workday_start_hour=10, workday_end_hour=13, slot_duration_minutes=30, horizon_days=1
        )

        slots = generate_available_slots([], wednesday_noon, policy)

        assert slots == [at(16, 10) + timedelta(minutes=30 * i) for i in range(6)]


def test_group_slots_by_day(wednesday_noon, madrid_policy):
    slots = generate_available_slots([], wednesday_noon, madrid_policy)

    grouped = group_slots_by_day(reversed(slots), madrid_policy.timezone)

    assert list(grouped) == sorted(grouped)
    assert len(grouped) == 10
    assert all(len(day_slots) == 9 for day_slots in grouped.values())
    assert grouped[date(2025, 1, 16)][0] == at(16, 8)


def test_is_occupied():
    existing = [make_slot(at(16, 10), at(16, 11))]

    assert is_occupied(at(16, 10), existing) is True
    assert is_occupied(at(16, 9, 30), existing) is True
    assert is_occupied(at(16, 11), existing) is False
    assert is_occupied(at(16, 10), []) is False


def test_build_booking(utc_policy):
    slot = build_booking(PATIENT_ID, PSYCHOLOGIST_ID, at(16, 10), utc_policy)

    assert slot.status is SlotStatus.BOOKED
    assert slot.patient_id == PATIENT_ID
    assert slot.psychologist_id == PSYCHOLOGIST_ID
    assert slot.end_time == at(16, 11)


def test_build_block_has_no_patient(utc_policy):
    slot = build_block(PSYCHOLOGIST_ID, at(16, 10), utc_policy, notes="Formación")

    assert slot.status is SlotStatus.BLOCKED
    assert slot.patient_id is None
    assert slot.end_time - slot.start_time == timedelta(hours=1)
    assert slot.notes == "Formación"


def test_build_block_does_not_check_occupancy(utc_policy):
    existing = [make_slot(at(16, 10), at(16, 11))]

    slot = build_block(PSYCHOLOGIST_ID, at(16, 10), utc_policy)

    assert is_occupied(slot.start_time, existing)


@pytest.mark.parametrize("now_hour, expected_count", [(9, 2), (10, 2), (11, 1)])
def test_upcoming_for_patient(now_hour, expected_count):
    slots = [
        make_slot(at(16, 13), at(16, 14)),
        make_slot(at(16, 10), at(16, 11)),
        make_slot(at(16, 12), at(16, 13), patient_id="someone-else"),
        make_slot(at(16, 15), at(16, 16), status=SlotStatus.BLOCKED),
    ]

    upcoming = upcoming_for_patient(slots, PATIENT_ID, at(16, now_hour))

    assert len(upcoming) == expected_count
    assert upcoming[-1].start_time == at(16, 13)
    assert upcoming == sorted(upcoming, key=lambda slot: slot.start_time)
