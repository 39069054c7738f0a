"""Test helpers shared across test modules."""

from datetime import datetime

from naretbox.domain.entities.appointment import AppointmentSlot, SlotStatus
from naretbox.domain.entities.assessment import QuestionResponse

PSYCHOLOGIST_ID = "psy-001"
PATIENT_ID = "patient-001"


def answers(**answers_by_id) -> list[QuestionResponse]:
    """Build responses from keyword arguments: ``answers(dep_1="Siempre")``."""
    return [QuestionResponse(question_id=qid, answer=answer) for qid, answer in answers_by_id.items()]


def bdi_answers(values: list[int]) -> list[QuestionResponse]:
    """BDI-II responses ``bdi_1``.. with ``"<n>: ..."`` answers."""
    return [
        QuestionResponse(question_id=f"bdi_{number}", answer=f"{value}: respuesta")
        for number, value in enumerate(values, start=1)
    ]


def make_slot(
    start: datetime,
    end: datetime,
    status: SlotStatus = SlotStatus.BOOKED,
    psychologist_id: str = PSYCHOLOGIST_ID,
    patient_id: str | None = PATIENT_ID,
) -> AppointmentSlot:
    if status is SlotStatus.BLOCKED:
        patient_id = None
    return AppointmentSlot(
        psychologist_id=psychologist_id,
        patient_id=patient_id,
        start_time=start,
        end_time=end,
        status=status,
    )
