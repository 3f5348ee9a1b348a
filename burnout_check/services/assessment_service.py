"""Burnout scoring: reverse coding, min-max normalization, risk banding and advice."""

import logging
from typing import Mapping, Sequence

from burnout_check.models.assessment_models import AssessmentResult, Dimension, Question
from burnout_check.utils.questions import QUESTIONS, SCALE_MAX, SCALE_MIN
from burnout_check.utils.scoring import generate_advice, get_risk_level

INCOMPLETE_MESSAGE = "Please answer all questions before viewing your result."


class AssessmentError(ValueError):
    """Base class for assessment failures."""


class IncompleteSubmission(AssessmentError):
    """Raised by callers when a submission leaves questions unanswered."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(INCOMPLETE_MESSAGE)


class MissingAnswer(AssessmentError):
    """Raised by score() when invoked without an answer for question_id."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"No answer recorded for question {question_id!r}")


def find_unanswered(answers: Mapping[str, int], questions: Sequence[Question] = QUESTIONS) -> list:
    return [q.id for q in questions if answers.get(q.id) is None]


def validate_submission(answers: Mapping[str, int], questions: Sequence[Question] = QUESTIONS) -> None:
    missing = find_unanswered(answers, questions)
    if missing:
        raise IncompleteSubmission(missing)


def effective_value(question: Question, value: int) -> int:
    # 1 <-> 5, 2 <-> 4 on reverse-coded items
    if question.reverse:
        return SCALE_MIN + SCALE_MAX - value
    return value


def normalize(total: int, count: int) -> float:
    return (total - count * SCALE_MIN) / (count * (SCALE_MAX - SCALE_MIN))


def score(answers: Mapping[str, int], questions: Sequence[Question] = QUESTIONS) -> AssessmentResult:
    """
    Score a complete answer set against the question bank.

    Raises MissingAnswer if any question has no answer. Dimensions with no
    question in the bank are left out of dimension_scores.
    """
    if not questions:
        raise ValueError("Question bank is empty")

    raw_total = 0
    dim_sums = {d: 0 for d in Dimension}
    dim_counts = {d: 0 for d in Dimension}

    for q in questions:
        v = answers.get(q.id)
        if v is None:
            raise MissingAnswer(q.id)
        v = effective_value(q, v)
        raw_total += v
        dim_sums[q.dimension] += v
        dim_counts[q.dimension] += 1

    normalized_score = normalize(raw_total, len(questions))
    dimension_scores = {
        d: normalize(dim_sums[d], dim_counts[d])
        for d in Dimension
        if dim_counts[d]
    }

    return AssessmentResult(
        normalized_score=normalized_score,
        risk=get_risk_level(normalized_score),
        dimension_scores=dimension_scores,
        advice=generate_advice(dimension_scores),
    )


def assess(answers: Mapping[str, int], questions: Sequence[Question] = QUESTIONS) -> AssessmentResult:
    """Validate completeness, then score. Used by the API and the form."""
    try:
        validate_submission(answers, questions)
    except IncompleteSubmission as e:
        logging.warning(f"Submission rejected: {len(e.missing)} unanswered question(s)")
        raise

    result = score(answers, questions)
    logging.info(f"Assessment scored: {result.normalized_score:.3f} ({result.risk.label})")
    return result
