"""
Instrument schema value objects.

An instrument is described once, at template-authoring time: its sections
(id prefix, item count, points per item, severity bands) and its questions
with tagged answer options. Scorers read everything from the schema, so no
instrument constant lives inside the scoring code.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from naretbox.domain.exceptions import ValidationError


class QuestionKind(str, Enum):
    """Input widget family of a question."""

    MULTIPLE_CHOICE = "multiple_choice"
    SCALE = "scale"
    TEXT = "text"


@dataclass(frozen=True)
class AnswerOption:
    """
    A selectable answer carrying both its display label and its score.

    ``points`` is ``None`` for options that exist in the instrument but do not
    count towards severity (e.g. yes/no history questions).
    """

    label: str
    points: int | None = None

    @property
    def is_scored(self) -> bool:
        return self.points is not None


@dataclass(frozen=True)
class SeverityBand:
    """Lower-inclusive score cutoff mapped to a severity level."""

    min_score: int
    level: Any
    advice: str = ""


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    kind: QuestionKind = QuestionKind.MULTIPLE_CHOICE
    section: str | None = None
    options: tuple[AnswerOption, ...] = ()
    is_red_flag: bool = False

    def option_for(self, label: str) -> AnswerOption | None:
        for option in self.options:
            if option.label == label:
                return option
        return None


@dataclass(frozen=True)
class SectionDefinition:
    """
    A named group of questions scored together.

    Membership is decided by ``id_prefix`` on the question id.
    """

    key: str
    title: str
    id_prefix: str
    item_count: int
    max_points_per_item: int = 3
    bands: tuple[SeverityBand, ...] = ()
    scored: bool = True

    @property
    def max_score(self) -> int:
        return self.item_count * self.max_points_per_item

    def contains(self, question_id: str) -> bool:
        return question_id.startswith(self.id_prefix)

    def classify(self, score: int) -> SeverityBand:
        return classify_score(score, self.bands)


@dataclass(frozen=True)
class InstrumentSchema:
    """Complete, immutable description of a clinical questionnaire."""

    template_id: str
    title: str
    description: str
    questions: tuple[Question, ...]
    sections: tuple[SectionDefinition, ...] = ()
    answer_scale: tuple[AnswerOption, ...] = ()
    bands: tuple[SeverityBand, ...] = ()
    red_flag_message: str | None = None
    _index: dict[str, Question] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {question.id: question for question in self.questions}
        if len(index) != len(self.questions):
            raise ValidationError(f"Duplicate question ids in instrument '{self.template_id}'")
        object.__setattr__(self, "_index", index)

        for section in self.sections:
            members = [q for q in self.questions if section.contains(q.id)]
            if section.scored and len(members) != section.item_count:
                raise ValidationError(
                    f"Section '{section.key}' declares {section.item_count} items "
                    f"but the instrument defines {len(members)}"
                )

    @property
    def scored_sections(self) -> tuple[SectionDefinition, ...]:
        return tuple(section for section in self.sections if section.scored)

    @property
    def max_score(self) -> int:
        return sum(section.max_score for section in self.scored_sections)

    def question(self, question_id: str) -> Question | None:
        return self._index.get(question_id)

    def section(self, key: str) -> SectionDefinition:
        for section in self.sections:
            if section.key == key:
                return section
        raise KeyError(key)

    def resolve_option(self, question_id: str, label: str) -> AnswerOption | None:
        """
        Find the tagged option for a free-form answer label.

        Known questions use their own option set; ids the instrument does not
        define fall back to the instrument-wide answer scale.
        """
        question = self._index.get(question_id)
        if question is not None and question.options:
            return question.option_for(label)
        for option in self.answer_scale:
            if option.label == label:
                return option
        return None


def classify_score(score: int, bands: tuple[SeverityBand, ...]) -> SeverityBand:
    """Return the highest band whose cutoff *score* reaches."""
    if not bands:
        raise ValidationError("No severity bands configured")
    ordered = sorted(bands, key=lambda band: band.min_score, reverse=True)
    for band in ordered:
        if score >= band.min_score:
            return band
    return ordered[-1]
