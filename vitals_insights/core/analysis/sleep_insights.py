# vitals_insights/core/analysis/sleep_insights.py
"""
Module for turning a nightly sleep score result into a three-layer insight.
"""

import logging
from typing import List, Tuple

from vitals_insights.core.analysis.classification import (
    classify_range,
    severity,
    strongest_component,
    weakest_component,
)
from vitals_insights.core.models.data_models import InsightStatus, SleepScoreResult
from vitals_insights.core.models.output_models import ComponentInsight, SleepInsight
from vitals_insights.utils.constants import (
    DEEP_SLEEP,
    DURATION,
    EFFICIENCY,
    ONSET,
    REM_SLEEP,
    rem_override_analysis,
    rem_override_seconds,
    sleep_analysis_templates,
    sleep_balanced_headline,
    sleep_headline_template,
    sleep_negative_phrases,
    sleep_positive_phrases,
    sleep_range_labels,
    sleep_ranges,
    sleep_recommendations,
)
from vitals_insights.utils.formatting import format_duration, format_minutes, format_percent

logger = logging.getLogger(__name__)


class SleepInsightEngine:
    """
    Generates a headline, a per-metric breakdown and a recommendation from a
    single night's sleep score result.

    The engine holds no state, so one instance can be shared across callers.
    """

    def generate_insight(self, result: SleepScoreResult) -> SleepInsight:
        """
        Build the insight for one night of sleep.

        Args:
            result: Finalized sleep score result for the night

        Returns:
            SleepInsight: Headline, breakdown in evaluation order, and recommendation
        """
        components = self.build_components(result)

        weakest = weakest_component(components)
        strongest = strongest_component(components)
        logger.debug(f"Weakest sleep metric: {weakest.metric_name} ({weakest.status.value}), "
                     f"strongest: {strongest.metric_name} ({strongest.status.value})")

        return SleepInsight(
            headline=self._headline(weakest, strongest),
            component_breakdown=components,
            recommendation=self._recommendation(weakest),
        )

    def build_components(self, result: SleepScoreResult) -> List[ComponentInsight]:
        """Classify duration, deep sleep, REM, efficiency and onset, in that order."""
        total = result.time_asleep
        deep_range = self._personalized_range(total, sleep_ranges['deep_sleep_fraction'])
        rem_range = self._personalized_range(total, sleep_ranges['rem_sleep_fraction'])

        duration = self._make_component(
            name=DURATION,
            user_value=format_duration(total),
            optimal_range=sleep_range_labels[DURATION],
            value=total / 60,
            bounds=sleep_ranges['duration_minutes'],
        )

        deep = self._make_component(
            name=DEEP_SLEEP,
            user_value=format_duration(result.deep_sleep),
            optimal_range=self._range_label(deep_range),
            value=result.deep_sleep,
            bounds=deep_range,
        )

        if result.rem_sleep >= rem_override_seconds:
            # Extra REM past two hours is never penalized
            rem = ComponentInsight(
                metric_name=REM_SLEEP,
                user_value=format_duration(result.rem_sleep),
                optimal_range=sleep_range_labels['rem_override'],
                analysis=rem_override_analysis,
                status=InsightStatus.OPTIMAL,
            )
        else:
            rem = self._make_component(
                name=REM_SLEEP,
                user_value=format_duration(result.rem_sleep),
                optimal_range=self._range_label(rem_range),
                value=result.rem_sleep,
                bounds=rem_range,
            )

        efficiency = self._make_component(
            name=EFFICIENCY,
            user_value=format_percent(result.sleep_efficiency * 100),
            optimal_range=sleep_range_labels[EFFICIENCY],
            value=result.sleep_efficiency,
            bounds=sleep_ranges['sleep_efficiency'],
        )

        onset = self._make_component(
            name=ONSET,
            user_value=format_minutes(result.time_to_fall_asleep),
            optimal_range=sleep_range_labels[ONSET],
            value=result.time_to_fall_asleep,
            bounds=sleep_ranges['onset_minutes'],
        )

        return [duration, deep, rem, efficiency, onset]

    def _make_component(self, name, user_value, optimal_range, value, bounds) -> ComponentInsight:
        status = classify_range(value, bounds)
        logger.debug(f"{name}: {value} against {bounds} -> {status.value}")
        return ComponentInsight(
            metric_name=name,
            user_value=user_value,
            optimal_range=optimal_range,
            analysis=sleep_analysis_templates[status.value].format(name=name),
            status=status,
        )

    @staticmethod
    def _personalized_range(total_seconds: float, fractions: Tuple[float, float]) -> Tuple[float, float]:
        lower_fraction, upper_fraction = fractions
        return total_seconds * lower_fraction, total_seconds * upper_fraction

    @staticmethod
    def _range_label(bounds: Tuple[float, float]) -> str:
        lower, upper = bounds
        return f"{format_duration(lower)}–{format_duration(upper)}"

    def _headline(self, weakest: ComponentInsight, strongest: ComponentInsight) -> str:
        if severity(weakest.status) == 0:
            return sleep_balanced_headline
        positive = sleep_positive_phrases.get(strongest.metric_name, sleep_positive_phrases['default'])
        negative = sleep_negative_phrases.get(weakest.metric_name, sleep_negative_phrases['default'])
        return sleep_headline_template.format(positive=positive, negative=negative)

    def _recommendation(self, weakest: ComponentInsight) -> str:
        return sleep_recommendations.get(weakest.metric_name, sleep_recommendations['default'])


_default_engine = SleepInsightEngine()


def generate_sleep_insight(result: SleepScoreResult) -> SleepInsight:
    """Generate the insight for one night of sleep with the shared engine."""
    return _default_engine.generate_insight(result)
