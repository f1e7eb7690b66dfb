"""
Module for classifying measured values into qualitative statuses and for
picking the weakest and strongest components of an insight.
"""

import math
from typing import Sequence, Tuple

from vitals_insights.core.models.data_models import InsightStatus
from vitals_insights.core.models.output_models import ComponentInsight
from vitals_insights.utils.constants import range_deviation_thresholds, score_thresholds

_SEVERITY = {
    InsightStatus.OPTIMAL: 0,
    InsightStatus.GOOD: 1,
    InsightStatus.FAIR: 2,
    InsightStatus.POOR: 3,
}


class InsightInputError(ValueError):
    """Raised when a value handed to the insight core violates its preconditions"""


def severity(status: InsightStatus) -> int:
    """Rank a status from 0 (optimal) to 3 (poor)."""
    return _SEVERITY[status]


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large for a float are still finite
        return True


def classify_range(value: float, bounds: Tuple[float, float]) -> InsightStatus:
    """
    Classify a value against a closed optimal range.

    Inside the range is optimal. Outside it, the fractional deviation from the
    nearest bound picks the bucket: under 5% is good, under 15% is fair and
    anything further is poor.

    Args:
        value: The measured value
        bounds: (lower, upper) of the optimal range, inclusive

    Returns:
        InsightStatus: The qualitative status of the value
    """
    lower, upper = bounds
    if not all(_is_finite(operand) for operand in (value, lower, upper)):
        raise InsightInputError(f"Cannot classify non-finite value {value} against range {bounds}")
    if lower > upper:
        raise InsightInputError(f"Invalid range: lower bound {lower} is above upper bound {upper}")

    if lower <= value <= upper:
        return InsightStatus.OPTIMAL

    try:
        if value < lower:
            reference, distance = lower, lower - value
        else:
            reference, distance = upper, value - upper

        # No relative deviation from a zero bound
        if reference == 0:
            return InsightStatus.POOR
        deviation = distance / reference
    except OverflowError:
        # Deviation beyond float range
        return InsightStatus.POOR
    if deviation < range_deviation_thresholds['good']:
        return InsightStatus.GOOD
    elif deviation < range_deviation_thresholds['fair']:
        return InsightStatus.FAIR
    return InsightStatus.POOR


def classify_score(score: float) -> InsightStatus:
    """Classify an already normalized 0-100 score by absolute cut points."""
    if not _is_finite(score):
        raise InsightInputError(f"Cannot classify non-finite score {score}")
    if score >= score_thresholds['optimal']:
        return InsightStatus.OPTIMAL
    elif score >= score_thresholds['good']:
        return InsightStatus.GOOD
    elif score >= score_thresholds['fair']:
        return InsightStatus.FAIR
    return InsightStatus.POOR


def weakest_component(components: Sequence[ComponentInsight]) -> ComponentInsight:
    """Component with the worst status; the earliest one wins a tie."""
    if not components:
        raise InsightInputError("At least one classifiable component is required")
    return max(components, key=lambda component: severity(component.status))


def strongest_component(components: Sequence[ComponentInsight]) -> ComponentInsight:
    """Component with the best status; the earliest one wins a tie."""
    if not components:
        raise InsightInputError("At least one classifiable component is required")
    return min(components, key=lambda component: severity(component.status))
