from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class Dimension(str, Enum):
    SLEEP = "sleep"
    MOTIVATION = "motivation"
    WORKLOAD = "workload"
    EMOTION = "emotion"


def read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    dimension: Dimension
    reverse: bool = False


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int
    label: str


class RiskLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str
    label: str
    color: str
    description: str


class AssessmentResult(BaseModel):
    """
    Outcome of one scored submission.

    normalized_score and every dimension score lie in [0, 1]. Neither the
    scores mapping nor the advice can be changed once built.
    """
    model_config = ConfigDict(frozen=True)

    normalized_score: float
    risk: RiskLevel
    dimension_scores: Mapping[Dimension, float]
    advice: Tuple[str, ...]

    @field_validator("dimension_scores")
    @classmethod
    def _freeze_scores(cls, value):
        return read_only(value)

    @field_serializer("dimension_scores")
    def _dump_scores(self, value):
        return dict(value)
