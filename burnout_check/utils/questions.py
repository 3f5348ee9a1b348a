from types import MappingProxyType
from typing import Optional

from burnout_check.models.assessment_models import AnswerOption, Dimension, Question

QUESTIONS = (
    Question(id="sleep_quality", text="I sleep well and wake up feeling rested.",
             dimension=Dimension.SLEEP, reverse=True),
    Question(id="sleep_problems", text="Recently, I have trouble falling asleep or staying asleep because of work or study.",
             dimension=Dimension.SLEEP),
    Question(id="motivation_drop", text="I feel less motivated to work or study than I used to.",
             dimension=Dimension.MOTIVATION),
    Question(id="dread_mornings", text="I often feel a sense of dread when I think about the upcoming work/study day.",
             dimension=Dimension.EMOTION),
    Question(id="cynicism", text="I feel more negative or cynical about my work or studies.",
             dimension=Dimension.EMOTION),
    Question(id="concentration", text="I find it hard to concentrate or make decisions.",
             dimension=Dimension.WORKLOAD),
    Question(id="overwhelmed", text="I feel overwhelmed by the amount of work I have.",
             dimension=Dimension.WORKLOAD),
    Question(id="exhaustion_end_of_day", text="At the end of the day, I feel completely emotionally and physically exhausted.",
             dimension=Dimension.EMOTION),
    Question(id="enjoyment", text="I still enjoy parts of my work/study and find them meaningful.",
             dimension=Dimension.MOTIVATION, reverse=True),
    Question(id="detachment", text="I feel detached from the people I work or study with (e.g., classmates, colleagues).",
             dimension=Dimension.EMOTION),
)

OPTIONS = (
    AnswerOption(value=1, label="Never"),
    AnswerOption(value=2, label="Rarely"),
    AnswerOption(value=3, label="Sometimes"),
    AnswerOption(value=4, label="Often"),
    AnswerOption(value=5, label="Always"),
)

SCALE_MIN = OPTIONS[0].value
SCALE_MAX = OPTIONS[-1].value

# Order in which results are listed and advice is given
DISPLAY_ORDER = (Dimension.SLEEP, Dimension.WORKLOAD, Dimension.MOTIVATION, Dimension.EMOTION)

DIMENSION_LABELS = MappingProxyType({
    Dimension.SLEEP: "Sleep",
    Dimension.WORKLOAD: "Workload / Focus",
    Dimension.MOTIVATION: "Motivation / Meaning",
    Dimension.EMOTION: "Emotions / Cynicism",
})


def question_by_id(question_id: str) -> Optional[Question]:
    for q in QUESTIONS:
        if q.id == question_id:
            return q
    return None
