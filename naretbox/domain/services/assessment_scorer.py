"""
Assessment Scorer

Converts answered questionnaires into clinical severity levels for the
depression/anxiety/stress assessment and for the BDI-II inventory.

Scoring is pure: it reads only the responses and the instrument schema and
never raises for a malformed individual response. Missing or unparseable
answers contribute zero points.
"""

import logging
from collections.abc import Iterable, Mapping

from naretbox.domain.entities.assessment import (
    AssessmentResult,
    BDIResult,
    QuestionResponse,
    SectionScore,
    SeverityLevel,
)
from naretbox.domain.instruments import BDI_II, INSTRUMENTS, MENTAL_HEALTH_ASSESSMENT
from naretbox.domain.value_objects.instrument import (
    AnswerOption,
    InstrumentSchema,
    classify_score,
)

logger = logging.getLogger(__name__)


def answer_points(instrument: InstrumentSchema, response: QuestionResponse) -> int:
    """
    Points earned by one response of an ordinal instrument.

    Only options tagged with points count; any other value (yes/no answers,
    free text, numbers, unknown labels) scores zero.
    """
    answer = response.answer
    if isinstance(answer, AnswerOption):
        return answer.points or 0
    if not isinstance(answer, str):
        return 0

    option = instrument.resolve_option(response.question_id, answer)
    if option is None or not option.is_scored:
        return 0
    return option.points


def parse_item_value(answer: object, max_points: int = 3) -> int | None:
    """
    Extract the numeric value of a ``"<digit>: <label>"`` answer.

    Returns ``None`` when the answer has no colon, a non-numeric prefix, or a
    value outside ``0..max_points``. A bare string such as ``"2"`` has no
    colon and is rejected. A plain integer is taken as the item value itself,
    as stored when the option was recorded by number rather than by label.
    Booleans and floats are never item values.
    """
    if isinstance(answer, AnswerOption):
        value = answer.points
    elif isinstance(answer, bool):
        return None
    elif isinstance(answer, int):
        value = answer
    elif isinstance(answer, str):
        prefix, separator, _ = answer.partition(":")
        if not separator:
            return None
        try:
            value = int(prefix.strip())
        except ValueError:
            return None
    else:
        return None

    if value is None or not 0 <= value <= max_points:
        return None
    return value


def score_mental_health(
    responses: Iterable[QuestionResponse],
    instrument: InstrumentSchema = MENTAL_HEALTH_ASSESSMENT,
) -> AssessmentResult:
    """
    Score the depression/anxiety/stress assessment.

    Each scored section sums the points of every response whose id carries
    the section prefix; responses outside every scored section are ignored.
    A red-flag question answered above zero appends the instrument's alert,
    whatever the final severity.

    Args:
        responses: Answered questions, in any order
        instrument: Instrument schema; defaults to the initial assessment

    Returns:
        AssessmentResult with one SectionScore per scored section
    """
    responses = list(responses)
    red_flags: list[str] = []
    sections: dict[str, SectionScore] = {}

    for section in instrument.scored_sections:
        raw_score = 0
        for response in responses:
            if not section.contains(response.question_id):
                continue
            points = answer_points(instrument, response)
            question = instrument.question(response.question_id)
            if question is not None and question.is_red_flag and points > 0:
                if instrument.red_flag_message:
                    red_flags.append(instrument.red_flag_message)
            raw_score += points

        band = section.classify(raw_score)
        sections[section.key] = SectionScore(
            raw_score=raw_score,
            max_score=section.max_score,
            level=band.level,
            advice=band.advice,
        )

    total_score = sum(score.raw_score for score in sections.values())
    if red_flags:
        logger.warning("Assessment scored with %d red flag(s)", len(red_flags))

    return AssessmentResult(sections=sections, total_score=total_score, red_flags=red_flags)


def score_bdi(
    responses: Iterable[QuestionResponse],
    instrument: InstrumentSchema = BDI_II,
) -> BDIResult:
    """
    Score the BDI-II inventory.

    Only the instrument's own items are summed (0-63 for the 21 items); when
    an item is answered twice the last answer wins. The suicidal-risk flag is
    raised when the instrument's red-flag item parses above zero.
    """
    answers: dict[str, object] = {}
    for response in responses:
        answers[response.question_id] = response.answer

    max_points = max(
        (section.max_points_per_item for section in instrument.scored_sections), default=3
    )

    score = 0
    has_suicidal_risk = False
    for question in instrument.questions:
        if question.id not in answers:
            continue
        value = parse_item_value(answers[question.id], max_points)
        if value is None:
            logger.debug("Skipping unparseable answer for %s", question.id)
            continue
        score += value
        if question.is_red_flag and value > 0:
            has_suicidal_risk = True

    band = classify_score(score, instrument.bands)
    if has_suicidal_risk:
        logger.warning("BDI-II scored with suicidal-ideation item above zero")

    return BDIResult(has_suicidal_risk=has_suicidal_risk, score=score, level=band.level)


def is_risk_assessment(result: AssessmentResult, include_anxiety: bool = False) -> bool:
    """
    Whether a scored assessment needs the psychologist's attention.

    Red flags or severe depression always count; the dashboard's alert
    counter also counts severe anxiety (``include_anxiety=True``).
    """
    if result.has_red_flags or result.depression.level is SeverityLevel.SEVERE:
        return True
    return include_anxiety and result.anxiety.level is SeverityLevel.SEVERE


def count_risk_alerts(results: Iterable[AssessmentResult]) -> int:
    return sum(1 for result in results if is_risk_assessment(result, include_anxiety=True))


class AssessmentScorer:
    """
    Picks the scoring function for a questionnaire template.

    Templates authored by psychologists have no scoring rules; for them
    ``score_for_template`` returns ``None`` and the caller shows the raw
    answers.
    """

    def __init__(self, instruments: Mapping[str, InstrumentSchema] | None = None) -> None:
        self.instruments = dict(instruments if instruments is not None else INSTRUMENTS)

    def score_mental_health(self, responses: Iterable[QuestionResponse]) -> AssessmentResult:
        return score_mental_health(responses, MENTAL_HEALTH_ASSESSMENT)

    def score_bdi(self, responses: Iterable[QuestionResponse]) -> BDIResult:
        return score_bdi(responses, BDI_II)

    def score_for_template(
        self, template_id: str, responses: Iterable[QuestionResponse]
    ) -> AssessmentResult | BDIResult | None:
        instrument = self.instruments.get(template_id)
        if instrument is None:
            return None
        if instrument.bands:
            # Inventories with instrument-wide bands are scored on their total
            return score_bdi(responses, instrument)
        return score_mental_health(responses, instrument)
