import math
from types import MappingProxyType

from burnout_check.models.assessment_models import Dimension, RiskLevel
from burnout_check.utils.questions import DISPLAY_ORDER

LOW_RISK = RiskLevel(
    level="low",
    label="Low risk",
    color="#16a34a",
    description="Your answers suggest a low current risk of burnout. "
                "Keep maintaining healthy habits and balance.",
)

MODERATE_RISK = RiskLevel(
    level="moderate",
    label="Moderate risk",
    color="#f97316",
    description="There are some signs of stress that could grow into burnout if ignored. "
                "It may help to adjust workload and add rest.",
)

HIGH_RISK = RiskLevel(
    level="high",
    label="High risk",
    color="#dc2626",
    description="Your answers suggest several burnout indicators. Consider reaching out for support "
                "and making concrete changes to your schedule and habits.",
)

# (exclusive upper bound, level); anything above the last bound is HIGH_RISK
RISK_BANDS = (
    (0.33, LOW_RISK),
    (0.66, MODERATE_RISK),
)

RISK_BAR_LABELS = ("Low", "Medium", "High")

ADVICE = MappingProxyType({
    Dimension.SLEEP: "• Sleep: Try to set a fixed sleep schedule, limit screens before bed, "
                     "and avoid taking work into late-night hours.",
    Dimension.WORKLOAD: "• Workload: Break tasks into smaller pieces, prioritize the most important ones, "
                        "and talk with your supervisor/teacher if expectations feel unrealistic.",
    Dimension.MOTIVATION: "• Motivation: Reconnect with your long-term goals, celebrate small wins, "
                          "and include activities you enjoy during the week.",
    Dimension.EMOTION: "• Emotions: Practice short breaks, breathing exercises, or journaling. "
                       "Consider talking to a trusted friend, mentor, or counselor.",
})

BALANCED_ADVICE = (
    "You seem relatively balanced right now. Continue checking in with yourself regularly "
    "and protect your rest, boundaries, and social connections."
)

ADVICE_THRESHOLD = 0.5


def get_risk_level(score: float) -> RiskLevel:
    for upper, risk in RISK_BANDS:
        if score < upper:
            return risk
    return HIGH_RISK


def generate_advice(dimension_scores) -> tuple:
    """
    Tips for every dimension scoring strictly above 0.5, in display order.
    Falls back to a single balanced message when none qualifies.
    """
    advice = tuple(
        ADVICE[d] for d in DISPLAY_ORDER
        if d in dimension_scores and dimension_scores[d] > ADVICE_THRESHOLD
    )
    return advice or (BALANCED_ADVICE,)


def as_percent(value: float) -> int:
    # half up, so 0.125 shows as 13%
    return math.floor(value * 100 + 0.5)
