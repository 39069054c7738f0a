"""FastAPI dependency providers."""

from naretbox.presentation.api.dependencies.database import get_db_session
from naretbox.presentation.api.dependencies.services import (
    get_app_settings,
    get_appointment_repository,
    get_assessment_scorer,
    get_scheduling_service,
)

__all__ = [
    "get_app_settings",
    "get_appointment_repository",
    "get_assessment_scorer",
    "get_db_session",
    "get_scheduling_service",
]
