"""
Exception classes related to appointment operations.

This module defines exceptions raised while building, booking, blocking and
cancelling appointment slots.
"""

from typing import Any

from naretbox.domain.exceptions.base_exceptions import BaseApplicationError


class AppointmentError(BaseApplicationError):
    """Base class for appointment-related exceptions."""

    def __init__(
        self, message: str = "Appointment operation failed", *args: Any, **kwargs: Any
    ) -> None:
        super().__init__(message, *args, **kwargs)


class InvalidAppointmentStateError(AppointmentError):
    """Raised when a slot's status and patient assignment disagree."""

    def __init__(
        self,
        message: str = "Invalid appointment state",
        status: str | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        if status:
            message = f"{message} for status '{status}'"
        super().__init__(message, *args, **kwargs)
        self.status = status


class InvalidAppointmentTimeError(AppointmentError):
    """Raised when an invalid appointment time is specified."""

    def __init__(
        self, message: str = "Invalid appointment time", *args: Any, **kwargs: Any
    ) -> None:
        super().__init__(message, *args, **kwargs)


class SlotUnavailableError(AppointmentError):
    """
    Raised when the store rejects a new slot.

    The reservation may no longer be available; callers must refresh the
    availability before retrying.
    """

    def __init__(
        self,
        message: str = "The selected time is no longer available, refresh availability and try again",
        psychologist_id: str | None = None,
        start_time: Any | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, *args, **kwargs)
        self.psychologist_id = psychologist_id
        self.start_time = start_time


class AppointmentNotFoundError(AppointmentError):
    """Raised when an appointment cannot be found."""

    def __init__(
        self,
        message: str = "Appointment not found",
        appointment_id: str | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        if appointment_id:
            message = f"Appointment with ID {appointment_id} not found"
        super().__init__(message, *args, **kwargs)
        self.appointment_id = appointment_id
