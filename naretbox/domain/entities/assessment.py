"""
Assessment entities for clinical questionnaire scoring.

This module defines the response and result structures exchanged with the
scoring engine. Results are derived on demand and never stored.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SeverityLevel(str, Enum):
    """Severity of a depression/anxiety/stress section."""

    NORMAL = "Normal"
    MILD = "Leve"
    MODERATE = "Moderado"
    SEVERE = "Grave"


class BDISeverity(str, Enum):
    """Standard BDI-II interpretation bands."""

    MINIMAL = "Depresión mínima"
    MILD = "Depresión leve"
    MODERATE = "Depresión moderada"
    SEVERE = "Depresión grave"


@dataclass(frozen=True)
class QuestionResponse:
    """
    A single answered question.

    ``answer`` is the raw value stored with the assignment: an option label,
    a ``"<digit>: <label>"`` string for BDI-II, a number, or an already
    tagged ``AnswerOption``. Any other value (booleans, floats, lists) is
    kept as received and scores zero.
    """

    question_id: str
    answer: Any

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuestionResponse":
        """Create a response from a store record (``questionId``/``answer``)."""
        question_id = data.get("questionId", data.get("question_id", ""))
        return cls(question_id=str(question_id), answer=data.get("answer"))


@dataclass(frozen=True)
class SectionScore:
    raw_score: int
    max_score: int
    level: SeverityLevel
    advice: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "rawScore": self.raw_score,
            "maxScore": self.max_score,
            "level": self.level.value,
            "advice": self.advice,
        }


@dataclass(frozen=True)
class AssessmentResult:
    """Scored depression/anxiety/stress assessment."""

    sections: dict[str, SectionScore]
    total_score: int
    red_flags: list[str] = field(default_factory=list)

    @property
    def depression(self) -> SectionScore:
        return self.sections["depression"]

    @property
    def anxiety(self) -> SectionScore:
        return self.sections["anxiety"]

    @property
    def stress(self) -> SectionScore:
        return self.sections["stress"]

    @property
    def has_red_flags(self) -> bool:
        return bool(self.red_flags)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "depression": self.depression.to_dict(),
            "anxiety": self.anxiety.to_dict(),
            "stress": self.stress.to_dict(),
            "redFlags": list(self.red_flags),
        }


@dataclass(frozen=True)
class BDIResult:
    """
    Scored BDI-II inventory.

    ``has_suicidal_risk`` is the highest-priority field and is listed first
    so every consumer sees it before the score.
    """

    has_suicidal_risk: bool
    score: int
    level: BDISeverity

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasSuicidalRisk": self.has_suicidal_risk,
            "score": self.score,
            "level": self.level.value,
        }
