"""
Shared test fixtures.

Times are anchored on Wednesday 2025-01-15 so availability counts are stable.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from naretbox.application.services.scheduling_service import SchedulingService
from naretbox.core.config import Settings
from naretbox.domain.services.scheduling_engine import SchedulingPolicy
from naretbox.infrastructure.repositories.memory import InMemoryAppointmentRepository


@pytest.fixture
def wednesday_noon() -> datetime:
    """Reference 'now': Wednesday 2025-01-15 12:00 UTC."""
    return datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc_policy() -> SchedulingPolicy:
    return SchedulingPolicy()


@pytest.fixture
def madrid_policy() -> SchedulingPolicy:
    return SchedulingPolicy(timezone=ZoneInfo("Europe/Madrid"))


@pytest.fixture
def appointment_repository() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest.fixture
def scheduling_service(appointment_repository, utc_policy, wednesday_noon) -> SchedulingService:
    return SchedulingService(
        appointment_repository, policy=utc_policy, clock=lambda: wednesday_noon
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        TESTING=True,
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        TIMEZONE="UTC",
        LOG_LEVEL="WARNING",
    )

