"""
Assessment scoring API endpoints.

Scoring is stateless: the client posts the stored responses and receives the
derived result. Malformed individual answers score zero instead of failing.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from naretbox.domain.entities.assessment import AssessmentResult
from naretbox.domain.services.assessment_scorer import AssessmentScorer
from naretbox.presentation.api.dependencies.services import get_assessment_scorer
from naretbox.presentation.api.schemas.assessment import (
    AssessmentResultResponse,
    BDIResultResponse,
    ScoreRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Assessments"],
)


@router.post("/mental-health/score", response_model=AssessmentResultResponse)
async def score_mental_health(
    request: ScoreRequest,
    scorer: AssessmentScorer = Depends(get_assessment_scorer),
) -> AssessmentResultResponse:
    """
    Score the initial depression/anxiety/stress assessment.

    Args:
        request: Answered questions
        scorer: Assessment scorer

    Returns:
        Per-section scores, total score and red flags
    """
    logger.info("Scoring mental-health assessment with %d responses", len(request.responses))
    result = scorer.score_mental_health(request.to_domain())
    return AssessmentResultResponse.from_entity(result)


@router.post("/bdi/score", response_model=BDIResultResponse)
async def score_bdi(
    request: ScoreRequest,
    scorer: AssessmentScorer = Depends(get_assessment_scorer),
) -> BDIResultResponse:
    """Score the BDI-II inventory."""
    logger.info("Scoring BDI-II with %d responses", len(request.responses))
    result = scorer.score_bdi(request.to_domain())
    return BDIResultResponse.from_entity(result)


@router.post(
    "/templates/{template_id}/score",
    response_model=AssessmentResultResponse | BDIResultResponse,
)
async def score_template(
    request: ScoreRequest,
    template_id: str = Path(..., description="Questionnaire template ID"),
    scorer: AssessmentScorer = Depends(get_assessment_scorer),
) -> AssessmentResultResponse | BDIResultResponse:
    """Score a questionnaire by template; custom templates have no scoring rules."""
    result = scorer.score_for_template(template_id, request.to_domain())
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No scoring rules for template {template_id}",
        )
    if isinstance(result, AssessmentResult):
        return AssessmentResultResponse.from_entity(result)
    return BDIResultResponse.from_entity(result)
