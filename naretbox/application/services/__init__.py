"""Application services."""

from naretbox.application.services.scheduling_service import SchedulingService

__all__ = ["SchedulingService"]
