"""
Beck Depression Inventory (BDI-II).

Twenty-one items, each answered with a ``"<0-3>: <statement>"`` option.
Item ids follow the stored template convention ``bdi_1`` .. ``bdi_21``; the
suicidal-ideation item is ``bdi_20``.
"""

from naretbox.domain.entities.assessment import BDISeverity
from naretbox.domain.value_objects.instrument import (
    AnswerOption,
    InstrumentSchema,
    Question,
    SectionDefinition,
    SeverityBand,
)

BDI_II_TEMPLATE_ID = "bdi-ii"
SUICIDAL_IDEATION_QUESTION_ID = "bdi_20"

BDI_BANDS = (
    SeverityBand(29, BDISeverity.SEVERE),
    SeverityBand(20, BDISeverity.MODERATE),
    SeverityBand(14, BDISeverity.MILD),
    SeverityBand(0, BDISeverity.MINIMAL),
)

_ITEMS: tuple[tuple[str, tuple[str, str, str, str]], ...] = (
    ("Tristeza", (
        "No me siento triste.",
        "Me siento triste gran parte del tiempo.",
        "Me siento triste todo el tiempo.",
        "Me siento tan triste o soy tan infeliz que no puedo soportarlo.",
    )),
    ("Pesimismo", (
        "No estoy desalentado respecto de mi futuro.",
        "Me siento más desalentado respecto de mi futuro que lo que solía estarlo.",
        "No espero que las cosas funcionen para mí.",
        "Siento que no hay esperanza para mi futuro y que sólo puede empeorar.",
    )),
    ("Fracaso", (
        "No me siento como un fracasado.",
        "He fracasado más de lo que hubiera debido.",
        "Cuando miro hacia atrás, veo muchos fracasos.",
        "Siento que como persona soy un fracaso total.",
    )),
    ("Pérdida de placer", (
        "Obtengo tanto placer como siempre por las cosas de las que disfruto.",
        "No disfruto tanto de las cosas como solía hacerlo.",
        "Obtengo muy poco placer de las cosas de las que solía disfrutar.",
        "No puedo obtener ningún placer de las cosas de las que solía disfrutar.",
    )),
    ("Sentimientos de culpa", (
        "No me siento particularmente culpable.",
        "Me siento culpable respecto de varias cosas que he hecho o que debería haber hecho.",
        "Me siento bastante culpable la mayor parte del tiempo.",
        "Me siento culpable todo el tiempo.",
    )),
    ("Sentimientos de castigo", (
        "No siento que esté siendo castigado.",
        "Siento que tal vez pueda ser castigado.",
        "Espero ser castigado.",
        "Siento que estoy siendo castigado.",
    )),
    ("Disconformidad con uno mismo", (
        "Siento acerca de mí lo mismo que siempre.",
        "He perdido la confianza en mí mismo.",
        "Estoy decepcionado conmigo mismo.",
        "No me gusto a mí mismo.",
    )),
    ("Autocrítica", (
        "No me critico ni me culpo más de lo habitual.",
        "Estoy más crítico conmigo mismo de lo que solía estarlo.",
        "Me critico a mí mismo por todos mis errores.",
        "Me culpo a mí mismo por todo lo malo que sucede.",
    )),
    ("Cansancio o fatiga", (
        "No estoy más cansado o fatigado que lo habitual.",
        "Me fatigo o me canso más fácilmente que lo habitual.",
        "Estoy demasiado fatigado o cansado para hacer muchas de las cosas que solía hacer.",
        "Estoy demasiado fatigado o cansado para hacer la mayoría de las cosas que solía hacer.",
    )),
    ("Llanto", (
        "No lloro más de lo que solía hacerlo.",
        "Lloro más de lo que solía hacerlo.",
        "Lloro por cualquier pequeñez.",
        "Siento ganas de llorar pero no puedo.",
    )),
    ("Agitación", (
        "No estoy más inquieto o tenso que lo habitual.",
        "Me siento más inquieto o tenso que lo habitual.",
        "Estoy tan inquieto o agitado que me es difícil quedarme quieto.",
        "Estoy tan inquieto o agitado que tengo que estar siempre en movimiento.",
    )),
    ("Pérdida de interés", (
        "No he perdido el interés en otras actividades o personas.",
        "Estoy menos interesado que antes en otras personas o cosas.",
        "He perdido casi todo el interés en otras personas o cosas.",
        "Me es difícil interesarme por algo.",
    )),
    ("Indecisión", (
        "Tomo mis propias decisiones tan bien como siempre.",
        "Me resulta más difícil que de costumbre tomar decisiones.",
        "Encuentro mucha más dificultad que antes para tomar decisiones.",
        "Tengo problemas para tomar cualquier decisión.",
    )),
    ("Desvalorización", (
        "No siento que yo no sea valioso.",
        "No me considero a mí mismo tan valioso y útil como solía considerarme.",
        "Me siento menos valioso cuando me comparo con otros.",
        "Siento que no valgo nada.",
    )),
    ("Pérdida de energía", (
        "Tengo tanta energía como siempre.",
        "Tengo menos energía que la que solía tener.",
        "No tengo suficiente energía para hacer demasiado.",
        "No tengo energía suficiente para hacer nada.",
    )),
    ("Cambios en los hábitos de sueño", (
        "No he experimentado ningún cambio en mis hábitos de sueño.",
        "Duermo algo más o algo menos que lo habitual.",
        "Duermo mucho más o mucho menos que lo habitual.",
        "Duermo la mayor parte del día o me despierto muy temprano y no puedo volver a dormirme.",
    )),
    ("Irritabilidad", (
        "No estoy tan irritable que lo habitual.",
        "Estoy más irritable que lo habitual.",
        "Estoy mucho más irritable que lo habitual.",
        "Estoy irritable todo el tiempo.",
    )),
    ("Cambios en el apetito", (
        "No he experimentado ningún cambio en mi apetito.",
        "Mi apetito es algo menor o algo mayor que lo habitual.",
        "Mi apetito es mucho menor o mucho mayor que antes.",
        "No tengo apetito en absoluto o quiero comer todo el día.",
    )),
    ("Dificultad de concentración", (
        "Puedo concentrarme tan bien como siempre.",
        "No puedo concentrarme tan bien como habitualmente.",
        "Me es difícil mantener la mente en algo por mucho tiempo.",
        "Encuentro que no puedo concentrarme en nada.",
    )),
    ("Pensamientos o deseos suicidas", (
        "No tengo ningún pensamiento de matarme.",
        "He tenido pensamientos de matarme, pero no lo haría.",
        "Querría matarme.",
        "Me mataría si tuviera la oportunidad de hacerlo.",
    )),
    ("Pérdida de interés en el sexo", (
        "No he notado ningún cambio reciente en mi interés por el sexo.",
        "Estoy menos interesado en el sexo de lo que solía estarlo.",
        "Estoy mucho menos interesado en el sexo.",
        "He perdido completamente el interés en el sexo.",
    )),
)


def _item(number: int, title: str, statements: tuple[str, ...]) -> Question:
    question_id = f"bdi_{number}"
    return Question(
        id=question_id,
        text=title,
        section="BDI-II",
        options=tuple(
            AnswerOption(f"{points}: {statement}", points)
            for points, statement in enumerate(statements)
        ),
        is_red_flag=question_id == SUICIDAL_IDEATION_QUESTION_ID,
    )


BDI_II = InstrumentSchema(
    template_id=BDI_II_TEMPLATE_ID,
    title="Inventario de Depresión de Beck (BDI-II)",
    description=(
        "Elija en cada grupo la afirmación que mejor describa cómo se ha sentido "
        "durante las últimas dos semanas, incluyendo el día de hoy."
    ),
    sections=(SectionDefinition("bdi", "BDI-II", "bdi_", item_count=len(_ITEMS), bands=BDI_BANDS),),
    bands=BDI_BANDS,
    questions=tuple(
        _item(number, title, statements)
        for number, (title, statements) in enumerate(_ITEMS, start=1)
    ),
)
