"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from naretbox.domain.exceptions.appointment_exceptions import (
    AppointmentError,
    AppointmentNotFoundError,
    InvalidAppointmentStateError,
    InvalidAppointmentTimeError,
    SlotUnavailableError,
)
from naretbox.domain.exceptions.base_exceptions import (
    BaseApplicationError,
    ValidationError,
)
from naretbox.domain.exceptions.persistence_exceptions import (
    PersistenceError,
    RepositoryError,
)

__all__ = [
    "AppointmentError",
    "AppointmentNotFoundError",
    "BaseApplicationError",
    "InvalidAppointmentStateError",
    "InvalidAppointmentTimeError",
    "PersistenceError",
    "RepositoryError",
    "SlotUnavailableError",
    "ValidationError",
]
