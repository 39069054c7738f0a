"""
Service dependencies for API routes.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from naretbox.application.services.scheduling_service import SchedulingService
from naretbox.core.config import Settings, get_settings
from naretbox.domain.repositories.appointment_repository import IAppointmentRepository
from naretbox.domain.services.assessment_scorer import AssessmentScorer
from naretbox.infrastructure.persistence.sqlalchemy.repositories.appointment_repository import (
    SQLAlchemyAppointmentRepository,
)
from naretbox.presentation.api.dependencies.database import get_db_session


def get_app_settings(request: Request) -> Settings:
    """Settings bound to the running application, falling back to the global ones."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_appointment_repository(
    db_session: AsyncSession = Depends(get_db_session),
) -> IAppointmentRepository:
    return SQLAlchemyAppointmentRepository(db_session)


async def get_scheduling_service(
    appointment_repository: IAppointmentRepository = Depends(get_appointment_repository),
    settings: Settings = Depends(get_app_settings),
) -> SchedulingService:
    return SchedulingService(appointment_repository, policy=settings.scheduling_policy())


def get_assessment_scorer() -> AssessmentScorer:
    return AssessmentScorer()
