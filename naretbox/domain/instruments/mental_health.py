"""
Initial mental-health assessment.

Six sections and twenty-three sectioned questions plus a free-text comment.
Only the depression, anxiety and stress sections are scored; their items use
the four-step frequency scale below.
"""

from naretbox.domain.entities.assessment import SeverityLevel
from naretbox.domain.value_objects.instrument import (
    AnswerOption,
    InstrumentSchema,
    Question,
    QuestionKind,
    SectionDefinition,
    SeverityBand,
)

MENTAL_HEALTH_TEMPLATE_ID = "a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11"

SELF_HARM_QUESTION_ID = "dep_5_risk"
SELF_HARM_ALERT = "ALERTA: El paciente reportó pensamientos de autolesión."

FREQUENCY_SCALE = (
    AnswerOption("Nunca", 0),
    AnswerOption("Algunas veces", 1),
    AnswerOption("Con frecuencia", 2),
    AnswerOption("Siempre", 3),
)

SECTION_BANDS = (
    SeverityBand(13, SeverityLevel.SEVERE, "Se recomienda intervención profesional intensiva."),
    SeverityBand(8, SeverityLevel.MODERATE, "Se sugiere evaluación profunda y posible cambio de enfoque."),
    SeverityBand(4, SeverityLevel.MILD, "Monitorear evolución."),
    SeverityBand(0, SeverityLevel.NORMAL, "No se requieren intervenciones adicionales."),
)

_DEPRESSION = "1. Depresión"
_ANXIETY = "2. Ansiedad"
_STRESS = "3. Estrés"
_SELF_PERCEPTION = "4. Autopercepción y Relaciones Sociales"
_HABITS = "5. Comportamientos y Hábitos"
_HISTORY = "6. Historia Personal y Contexto Familiar"


def _unscored(*labels: str) -> tuple[AnswerOption, ...]:
    return tuple(AnswerOption(label) for label in labels)


def _frequency(question_id: str, section: str, text: str, **kwargs) -> Question:
    return Question(id=question_id, text=text, section=section, options=FREQUENCY_SCALE, **kwargs)


MENTAL_HEALTH_ASSESSMENT = InstrumentSchema(
    template_id=MENTAL_HEALTH_TEMPLATE_ID,
    title="Cuestionario de Salud Mental - Evaluación Inicial",
    description=(
        "Evaluación estandarizada para medir niveles de depresión, ansiedad, "
        "estrés y bienestar general."
    ),
    sections=(
        SectionDefinition("depression", _DEPRESSION, "dep", item_count=5, bands=SECTION_BANDS),
        SectionDefinition("anxiety", _ANXIETY, "anx", item_count=5, bands=SECTION_BANDS),
        SectionDefinition("stress", _STRESS, "str", item_count=4, bands=SECTION_BANDS),
        SectionDefinition("self_perception", _SELF_PERCEPTION, "aut", item_count=3, scored=False),
        SectionDefinition("habits", _HABITS, "hab", item_count=3, scored=False),
        SectionDefinition("history", _HISTORY, "hist", item_count=3, scored=False),
    ),
    answer_scale=FREQUENCY_SCALE,
    red_flag_message=SELF_HARM_ALERT,
    questions=(
        _frequency(
            "dep_1",
            _DEPRESSION,
            "¿Con qué frecuencia se ha sentido decaído/a, triste o sin esperanza en las últimas dos semanas?",
        ),
        _frequency(
            "dep_2",
            _DEPRESSION,
            "¿Ha tenido dificultades para disfrutar de actividades que normalmente le resultan placenteras?",
        ),
        _frequency(
            "dep_3",
            _DEPRESSION,
            "¿Se ha sentido cansado/a o sin energía, incluso después de descansar?",
        ),
        _frequency(
            "dep_4",
            _DEPRESSION,
            "¿Ha tenido dificultades para concentrarse en cosas como leer el periódico o ver televisión?",
        ),
        _frequency(
            SELF_HARM_QUESTION_ID,
            _DEPRESSION,
            "¿Ha tenido pensamientos de autolesionarse o hacerse daño?",
            is_red_flag=True,
        ),
        _frequency(
            "anx_1",
            _ANXIETY,
            "¿Con qué frecuencia se ha sentido nervioso/a, ansioso/a o preocupado/a por cosas "
            "que normalmente no le preocuparían?",
        ),
        _frequency(
            "anx_2",
            _ANXIETY,
            "¿Ha experimentado temblores, palpitaciones o dificultad para respirar cuando se siente ansioso/a?",
        ),
        _frequency(
            "anx_3",
            _ANXIETY,
            "¿Se ha sentido tenso/a, con los músculos apretados, especialmente en los hombros o la mandíbula?",
        ),
        _frequency(
            "anx_4",
            _ANXIETY,
            "¿Tiene dificultades para relajarse o desconectar de las preocupaciones diarias?",
        ),
        _frequency(
            "anx_5",
            _ANXIETY,
            "¿Ha evitado situaciones o actividades debido a la ansiedad o el miedo?",
        ),
        _frequency(
            "str_1",
            _STRESS,
            "¿En las últimas dos semanas, cuántas veces ha sentido que no puede manejar las demandas de su vida?",
        ),
        _frequency(
            "str_2",
            _STRESS,
            "¿Con qué frecuencia ha tenido dificultades para dormir debido a preocupaciones o tensiones?",
        ),
        _frequency(
            "str_3",
            _STRESS,
            "¿Ha experimentado dolores de cabeza o problemas digestivos sin causa aparente?",
        ),
        _frequency(
            "str_4",
            _STRESS,
            "¿Ha tenido dificultades para concentrarse o sentirse fácilmente abrumado/a por tareas diarias?",
        ),
        Question(
            id="aut_1",
            section=_SELF_PERCEPTION,
            text="¿Se siente incomprendido/a por las personas cercanas a usted?",
            options=_unscored(*(option.label for option in FREQUENCY_SCALE)),
        ),
        Question(
            id="aut_2",
            section=_SELF_PERCEPTION,
            text="¿Siente que sus relaciones con amigos o familiares están afectadas por su estado emocional?",
            options=_unscored(*(option.label for option in FREQUENCY_SCALE)),
        ),
        Question(
            id="aut_3",
            section=_SELF_PERCEPTION,
            text="¿En general, cómo calificaría su bienestar emocional en las últimas dos semanas?",
            options=_unscored("Muy bien", "Bien", "Regular", "Malo", "Muy malo"),
        ),
        Question(
            id="hab_1",
            section=_HABITS,
            text="¿Ha experimentado cambios en su apetito o hábitos alimenticios?",
            options=_unscored(*(option.label for option in FREQUENCY_SCALE)),
        ),
        Question(
            id="hab_2",
            section=_HABITS,
            text="¿Ha tenido dificultades para dormir o dormir demasiado?",
            options=_unscored(*(option.label for option in FREQUENCY_SCALE)),
        ),
        Question(
            id="hab_3",
            section=_HABITS,
            text="¿Ha tenido más o menos energía de lo habitual?",
            options=_unscored("Mucho más", "Un poco más", "Igual", "Un poco menos", "Mucho menos"),
        ),
        Question(
            id="hist_1",
            section=_HISTORY,
            text="¿Ha tenido antecedentes familiares de trastornos emocionales?",
            options=_unscored("Sí", "No", "No sé"),
        ),
        Question(
            id="hist_2",
            section=_HISTORY,
            text="¿Hay eventos recientes en su vida que cree que puedan estar afectando su bienestar emocional?",
            options=_unscored("Sí", "No", "No estoy seguro/a"),
        ),
        Question(
            id="hist_3",
            section=_HISTORY,
            text="¿Ha tenido algún tipo de apoyo o terapia en el pasado?",
            options=_unscored("Sí, y fue útil", "Sí, pero no fue útil", "No he tenido terapia antes"),
        ),
        Question(
            id="comments",
            kind=QuestionKind.TEXT,
            section="Comentarios adicionales",
            text="Espacio para expresar cualquier otra preocupación o comentario",
        ),
    ),
)
