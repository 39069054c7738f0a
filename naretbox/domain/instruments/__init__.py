"""Clinical instruments known to the scoring engine."""

from naretbox.domain.instruments.bdi_ii import (
    BDI_II,
    BDI_II_TEMPLATE_ID,
    SUICIDAL_IDEATION_QUESTION_ID,
)
from naretbox.domain.instruments.mental_health import (
    FREQUENCY_SCALE,
    MENTAL_HEALTH_ASSESSMENT,
    MENTAL_HEALTH_TEMPLATE_ID,
    SELF_HARM_ALERT,
    SELF_HARM_QUESTION_ID,
)

INSTRUMENTS = {
    MENTAL_HEALTH_TEMPLATE_ID: MENTAL_HEALTH_ASSESSMENT,
    BDI_II_TEMPLATE_ID: BDI_II,
}

__all__ = [
    "BDI_II",
    "BDI_II_TEMPLATE_ID",
    "FREQUENCY_SCALE",
    "INSTRUMENTS",
    "MENTAL_HEALTH_ASSESSMENT",
    "MENTAL_HEALTH_TEMPLATE_ID",
    "SELF_HARM_ALERT",
    "SELF_HARM_QUESTION_ID",
    "SUICIDAL_IDEATION_QUESTION_ID",
]
