"""
Tests for instrument schema value objects and the bundled instruments.
"""

import pytest

from naretbox.domain.entities.assessment import SeverityLevel
from naretbox.domain.exceptions import ValidationError
from naretbox.domain.instruments import (
    BDI_II,
    INSTRUMENTS,
    MENTAL_HEALTH_ASSESSMENT,
    SUICIDAL_IDEATION_QUESTION_ID,
)
from naretbox.domain.value_objects.instrument import (
    AnswerOption,
    InstrumentSchema,
    Question,
    SectionDefinition,
    SeverityBand,
    classify_score,
)


def test_mental_health_schema_shape():
    assert len(MENTAL_HEALTH_ASSESSMENT.sections) == 6
    sectioned = [q for q in MENTAL_HEALTH_ASSESSMENT.questions if q.id != "comments"]
    assert len(sectioned) == 23
    assert [s.key for s in MENTAL_HEALTH_ASSESSMENT.scored_sections] == [
        "depression",
        "anxiety",
        "stress",
    ]
    assert MENTAL_HEALTH_ASSESSMENT.max_score == 42


def test_only_self_harm_question_is_red_flag():
    flagged = [q.id for q in MENTAL_HEALTH_ASSESSMENT.questions if q.is_red_flag]

    assert flagged == ["dep_5_risk"]


def test_bdi_schema_shape():
    assert [q.id for q in BDI_II.questions] == [f"bdi_{n}" for n in range(1, 22)]
    assert BDI_II.max_score == 63
    assert BDI_II.question(SUICIDAL_IDEATION_QUESTION_ID).is_red_flag is True
    assert BDI_II.question("bdi_20").text == "Pensamientos o deseos suicidas"
    assert BDI_II.question("bdi_1").options[0] == AnswerOption("0: No me siento triste.", 0)


def test_registry_is_keyed_by_template_id():
    for template_id, instrument in INSTRUMENTS.items():
        assert instrument.template_id == template_id


def test_resolve_option_prefers_question_options():
    assert MENTAL_HEALTH_ASSESSMENT.resolve_option("dep_1", "Siempre").points == 3
    assert MENTAL_HEALTH_ASSESSMENT.resolve_option("hist_1", "Sí").is_scored is False
    assert MENTAL_HEALTH_ASSESSMENT.resolve_option("hist_1", "Siempre") is None


def test_resolve_option_falls_back_to_answer_scale():
    assert MENTAL_HEALTH_ASSESSMENT.resolve_option("anx_99", "Con frecuencia").points == 2


def test_duplicate_question_ids_are_rejected():
    question = Question(id="q_1", text="?")

    with pytest.raises(ValidationError):
        InstrumentSchema("t", "T", "", questions=(question, question))


def test_section_item_count_must_match():
    with pytest.raises(ValidationError):
        InstrumentSchema(
            "t",
            "T",
            "",
            questions=(Question(id="q_1", text="?"),),
            sections=(SectionDefinition("q", "Q", "q_", item_count=2),),
        )


def test_section_membership_and_max_score():
    section = SectionDefinition("stress", "Estrés", "str", item_count=4)

    assert section.contains("str_3")
    assert not section.contains("dep_1")
    assert section.max_score == 12


@pytest.mark.parametrize(
    "score, level",
    [(0, SeverityLevel.NORMAL), (3, SeverityLevel.NORMAL), (4, SeverityLevel.MILD),
     (7, SeverityLevel.MILD), (8, SeverityLevel.MODERATE), (12, SeverityLevel.MODERATE),
     (13, SeverityLevel.SEVERE), (15, SeverityLevel.SEVERE)],
)
def test_section_bands(score, level):
    assert MENTAL_HEALTH_ASSESSMENT.section("depression").classify(score).level is level


def test_classify_score_below_all_bands_returns_lowest():
    bands = (SeverityBand(10, "high"), SeverityBand(5, "low"))

    assert classify_score(2, bands).level == "low"


def test_classify_score_requires_bands():
    with pytest.raises(ValidationError):
        classify_score(1, ())
