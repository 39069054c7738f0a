"""
Integration tests for the SQLAlchemy appointment repository.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from naretbox.application.services.scheduling_service import SchedulingService
from naretbox.domain.entities.appointment import SlotStatus
from naretbox.domain.exceptions import SlotUnavailableError
from naretbox.domain.services.scheduling_engine import SchedulingPolicy
from naretbox.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyAppointmentRepository,
)
from naretbox.tests.utils import PATIENT_ID, PSYCHOLOGIST_ID, make_slot

START = datetime(2025, 1, 16, 10, 0, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)


@pytest.mark.asyncio
async def test_create_and_read_back(db_session):
    repository = SQLAlchemyAppointmentRepository(db_session)
    slot = make_slot(START, START + HOUR)

    created = await repository.create(slot)
    fetched = await repository.get_by_id(slot.id)

    assert created == slot
    assert fetched == slot
    assert fetched.start_time.tzinfo is not None


@pytest.mark.asyncio
async def test_unique_start_per_psychologist(db_session):
    repository = SQLAlchemyAppointmentRepository(db_session)
    await repository.create(make_slot(START, START + HOUR))

    with pytest.raises(SlotUnavailableError):
        await repository.create(make_slot(START, START + HOUR, patient_id="patient-002"))

    # Session is usable after the rollback
    other = await repository.create(make_slot(START, START + HOUR, psychologist_id="psy-002"))
    assert other.psychologist_id == "psy-002"
    assert len(await repository.list_by_psychologist(PSYCHOLOGIST_ID)) == 1


@pytest.mark.asyncio
async def test_delete(db_session):
    repository = SQLAlchemyAppointmentRepository(db_session)
    slot = await repository.create(make_slot(START, START + HOUR, status=SlotStatus.BLOCKED))

    assert await repository.delete(slot.id) is True
    assert await repository.delete(slot.id) is False
    assert await repository.delete(uuid4()) is False
    assert await repository.get_by_id(slot.id) is None


@pytest.mark.asyncio
async def test_listing_orders_and_filters(db_session):
    repository = SQLAlchemyAppointmentRepository(db_session)
    late = await repository.create(make_slot(START + 4 * HOUR, START + 5 * HOUR))
    early = await repository.create(make_slot(START, START + HOUR))
    blocked = await repository.create(
        make_slot(START + HOUR, START + 2 * HOUR, status=SlotStatus.BLOCKED)
    )

    assert await repository.list_by_psychologist(PSYCHOLOGIST_ID) == [early, blocked, late]
    assert await repository.list_by_psychologist(
        PSYCHOLOGIST_ID, START + HOUR, START + 3 * HOUR
    ) == [blocked]
    assert await repository.list_by_patient(PATIENT_ID) == [early, late]


@pytest.mark.asyncio
async def test_concurrent_booking_race_loses_cleanly(db_session):
    now = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
    service = SchedulingService(
        SQLAlchemyAppointmentRepository(db_session), policy=SchedulingPolicy(), clock=lambda: now
    )
    start = (await service.get_availability(PSYCHOLOGIST_ID))[0]

    await service.book(PATIENT_ID, PSYCHOLOGIST_ID, start)
    with pytest.raises(SlotUnavailableError):
        await service.book("patient-002", PSYCHOLOGIST_ID, start)

    assert start not in await service.get_availability(PSYCHOLOGIST_ID)
