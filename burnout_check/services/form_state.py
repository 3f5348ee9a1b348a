"""
Questionnaire form state as immutable transitions.

Each operation returns a new FormState; the UI layer only keeps the latest one.
The answers mapping is read-only; every transition builds a fresh copy.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from burnout_check.models.assessment_models import AssessmentResult, read_only
from burnout_check.services.assessment_service import IncompleteSubmission, assess
from burnout_check.utils.questions import OPTIONS, question_by_id

VALID_VALUES = frozenset(opt.value for opt in OPTIONS)


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    answers: Mapping[str, int] = Field(default_factory=dict, validate_default=True)
    result: Optional[AssessmentResult] = None
    error: Optional[str] = None

    @field_validator("answers")
    @classmethod
    def _freeze_answers(cls, value):
        return read_only(value)

    @field_serializer("answers")
    def _dump_answers(self, value):
        return dict(value)

    @property
    def submitted(self) -> bool:
        return self.result is not None


def answer(state: FormState, question_id: str, value: int) -> FormState:
    if question_by_id(question_id) is None:
        raise ValueError(f"Unknown question: {question_id!r}")
    if value not in VALID_VALUES:
        raise ValueError(f"Answer must be one of {sorted(VALID_VALUES)}, got {value!r}")

    answers = dict(state.answers)
    answers[question_id] = value
    return FormState(answers=answers, result=state.result)


def submit(state: FormState) -> FormState:
    try:
        result = assess(state.answers)
    except IncompleteSubmission as e:
        return FormState(answers=state.answers, error=str(e))
    return FormState(answers=state.answers, result=result)


def reset() -> FormState:
    return FormState()
