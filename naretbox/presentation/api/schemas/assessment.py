"""
Pydantic schemas for questionnaire scoring endpoints.
"""

from typing import Any

from pydantic import Field

from naretbox.domain.entities.assessment import (
    AssessmentResult,
    BDIResult,
    QuestionResponse,
    SectionScore,
)
from naretbox.domain.services.assessment_scorer import is_risk_assessment
from naretbox.presentation.api.schemas.base import BaseModelConfig


class QuestionResponseSchema(BaseModelConfig):
    question_id: str = Field(..., min_length=1)
    # Raw JSON value; the scorer decides what counts.
    answer: Any = None

    def to_domain(self) -> QuestionResponse:
        return QuestionResponse(question_id=self.question_id, answer=self.answer)


class ScoreRequest(BaseModelConfig):
    """Answered questionnaire submitted for scoring."""

    responses: list[QuestionResponseSchema] = Field(default_factory=list)

    def to_domain(self) -> list[QuestionResponse]:
        return [response.to_domain() for response in self.responses]


class SectionScoreResponse(BaseModelConfig):
    raw_score: int
    max_score: int
    level: str
    advice: str

    @classmethod
    def from_entity(cls, score: SectionScore) -> "SectionScoreResponse":
        return cls(
            raw_score=score.raw_score,
            max_score=score.max_score,
            level=score.level.value,
            advice=score.advice,
        )


class AssessmentResultResponse(BaseModelConfig):
    """Scored depression/anxiety/stress assessment."""

    total_score: int
    depression: SectionScoreResponse
    anxiety: SectionScoreResponse
    stress: SectionScoreResponse
    red_flags: list[str]
    is_risk: bool = Field(..., description="Red flags or severe depression")

    @classmethod
    def from_entity(cls, result: AssessmentResult) -> "AssessmentResultResponse":
        return cls(
            total_score=result.total_score,
            depression=SectionScoreResponse.from_entity(result.depression),
            anxiety=SectionScoreResponse.from_entity(result.anxiety),
            stress=SectionScoreResponse.from_entity(result.stress),
            red_flags=list(result.red_flags),
            is_risk=is_risk_assessment(result),
        )


class BDIResultResponse(BaseModelConfig):
    """Scored BDI-II inventory; the suicidal-risk flag comes first."""

    has_suicidal_risk: bool
    score: int
    level: str

    @classmethod
    def from_entity(cls, result: BDIResult) -> "BDIResultResponse":
        return cls(
            has_suicidal_risk=result.has_suicidal_risk,
            score=result.score,
            level=result.level.value,
        )
