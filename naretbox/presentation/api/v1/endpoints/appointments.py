"""
Availability and appointment API endpoints.

Booking never re-checks availability; a slot taken in the meantime is
rejected by the store and reported with 409 so the client refreshes the
availability list.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from naretbox.application.services.scheduling_service import SchedulingService
from naretbox.domain.exceptions import (
    AppointmentNotFoundError,
    InvalidAppointmentStateError,
    InvalidAppointmentTimeError,
    SlotUnavailableError,
)
from naretbox.domain.utils.datetime_utils import from_epoch_ms, to_epoch_ms
from naretbox.presentation.api.dependencies.services import get_scheduling_service
from naretbox.presentation.api.schemas.appointment import (
    AvailabilityResponse,
    BlockRequest,
    BookingRequest,
    SlotResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Appointments"],
)


@router.get("/psychologists/{psychologist_id}/availability", response_model=AvailabilityResponse)
async def get_availability(
    psychologist_id: str = Path(..., min_length=1, max_length=64),
    service: SchedulingService = Depends(get_scheduling_service),
) -> AvailabilityResponse:
    """
    List bookable slots over the booking horizon.

    Args:
        psychologist_id: Psychologist whose calendar is queried
        service: Scheduling service

    Returns:
        Slot starts in epoch milliseconds, flat and grouped by local date
    """
    logger.info("Getting availability for psychologist %s", psychologist_id)
    by_day = await service.get_availability_by_day(psychologist_id)
    return AvailabilityResponse(
        psychologist_id=psychologist_id,
        timezone=str(service.policy.timezone),
        slots=[to_epoch_ms(start) for starts in by_day.values() for start in starts],
        days={
            day.isoformat(): [to_epoch_ms(start) for start in starts]
            for day, starts in by_day.items()
        },
    )


@router.get("/psychologists/{psychologist_id}/appointments", response_model=list[SlotResponse])
async def list_appointments(
    psychologist_id: str = Path(..., min_length=1, max_length=64),
    start_time: int | None = Query(None, alias="startTime", ge=0),
    end_time: int | None = Query(None, alias="endTime", ge=0),
    service: SchedulingService = Depends(get_scheduling_service),
) -> list[SlotResponse]:
    """List booked and blocked slots, optionally restricted to a time window."""
    slots = await service.list_appointments(
        psychologist_id,
        from_epoch_ms(start_time) if start_time is not None else None,
        from_epoch_ms(end_time) if end_time is not None else None,
    )
    return [SlotResponse.from_entity(slot) for slot in slots]


@router.get("/psychologists/{psychologist_id}/occupancy")
async def get_occupancy(
    psychologist_id: str = Path(..., min_length=1, max_length=64),
    start_time: int = Query(..., alias="startTime", ge=0),
    service: SchedulingService = Depends(get_scheduling_service),
) -> dict[str, bool]:
    """Whether a slot starting at ``startTime`` would cover an existing commitment."""
    occupied = await service.is_time_occupied(psychologist_id, from_epoch_ms(start_time))
    return {"occupied": occupied}


@router.get("/patients/{patient_id}/appointments", response_model=list[SlotResponse])
async def list_upcoming_for_patient(
    patient_id: str = Path(..., min_length=1, max_length=64),
    service: SchedulingService = Depends(get_scheduling_service),
) -> list[SlotResponse]:
    """A patient's booked slots that have not ended yet."""
    slots = await service.upcoming_for_patient(patient_id)
    return [SlotResponse.from_entity(slot) for slot in slots]


@router.post("/appointments", response_model=SlotResponse, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    request: BookingRequest,
    service: SchedulingService = Depends(get_scheduling_service),
) -> SlotResponse:
    """Book a one-hour slot for a patient."""
    logger.info("Booking slot for psychologist %s", request.psychologist_id)
    try:
        slot = await service.book(
            request.patient_id, request.psychologist_id, request.start, notes=request.notes
        )
    except SlotUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except (InvalidAppointmentTimeError, InvalidAppointmentStateError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return SlotResponse.from_entity(slot)


@router.post(
    "/appointments/blocks", response_model=SlotResponse, status_code=status.HTTP_201_CREATED
)
async def block_time(
    request: BlockRequest,
    service: SchedulingService = Depends(get_scheduling_service),
) -> SlotResponse:
    """Block a one-hour slot in the psychologist's calendar."""
    logger.info("Blocking slot for psychologist %s", request.psychologist_id)
    try:
        slot = await service.block(request.psychologist_id, request.start, notes=request.notes)
    except SlotUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except (InvalidAppointmentTimeError, InvalidAppointmentStateError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return SlotResponse.from_entity(slot)


@router.get("/appointments/{slot_id}", response_model=SlotResponse)
async def get_appointment(
    slot_id: UUID = Path(..., description="Slot ID"),
    service: SchedulingService = Depends(get_scheduling_service),
) -> SlotResponse:
    try:
        slot = await service.get_appointment(slot_id)
    except AppointmentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return SlotResponse.from_entity(slot)


@router.delete("/appointments/{slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_appointment(
    slot_id: UUID = Path(..., description="Slot ID"),
    service: SchedulingService = Depends(get_scheduling_service),
) -> Response:
    """Cancel a booking or remove a block. Unknown IDs are not an error."""
    await service.cancel(slot_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
