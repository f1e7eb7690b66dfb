# vitals_insights/core/analysis/recovery_insights.py
"""
Module for turning a recovery score result into a three-layer insight.

The stress component is scored upstream but is not surfaced in the
breakdown.
"""

import logging
import math
from typing import List, Optional

from vitals_insights.core.analysis.classification import (
    InsightInputError,
    classify_score,
    strongest_component,
    weakest_component,
)
from vitals_insights.core.models.data_models import (
    InsightStatus,
    RecoveryComponent,
    RecoveryScoreResult,
)
from vitals_insights.core.models.output_models import ComponentInsight, RecoveryInsight
from vitals_insights.utils.constants import (
    HEART_RATE_VARIABILITY,
    RESTING_HEART_RATE,
    SLEEP_QUALITY,
    baseline_range_template,
    hrv_analysis,
    recovery_limiter_headlines,
    recovery_mixed_headline,
    recovery_recommendations,
    recovery_stable_headline,
    rhr_analysis,
    sleep_quality_analysis,
)
from vitals_insights.utils.formatting import format_bpm, format_ms, format_percent

logger = logging.getLogger(__name__)


def _baseline_delta(change: float, baseline: float, metric_name: str) -> float:
    """Percentage change against the baseline, signed so that positive is better"""
    delta = change / baseline * 100
    if not math.isfinite(delta):
        raise InsightInputError(f"{metric_name} deviation from baseline {baseline} is not finite")
    return delta


class RecoveryInsightEngine:
    """Generates a headline, breakdown and training recommendation from a recovery score."""

    def generate_insight(self, result: RecoveryScoreResult) -> RecoveryInsight:
        components = self.build_components(result)

        # Both raise InsightInputError when nothing could be classified
        driver = strongest_component(components)
        limiter = weakest_component(components)
        logger.debug(f"Recovery driver: {driver.metric_name}, limiter: {limiter.metric_name}")

        return RecoveryInsight(
            headline=self._headline(components, driver, limiter),
            component_breakdown=components,
            recommendation=self.recommendation_for(result.final_score),
        )

    def build_components(self, result: RecoveryScoreResult) -> List[ComponentInsight]:
        """Build HRV, resting heart rate and sleep components, skipping any that lack data."""
        candidates = [
            self._hrv_component(result.hrv_component),
            self._rhr_component(result.rhr_component),
            self._sleep_component(result.sleep_component),
        ]
        components = [component for component in candidates if component is not None]
        if len(components) < len(candidates):
            logger.info(f"Recovery breakdown has {len(components)} of {len(candidates)} components")
        return components

    def _hrv_component(self, component: RecoveryComponent) -> Optional[ComponentInsight]:
        if not component.has_baseline_comparison:
            return None
        current, baseline = component.current_value, component.baseline
        # Higher HRV than baseline is better
        delta = _baseline_delta(current - baseline, baseline, HEART_RATE_VARIABILITY)
        template = hrv_analysis['above'] if delta >= 0 else hrv_analysis['below']
        return ComponentInsight(
            metric_name=HEART_RATE_VARIABILITY,
            user_value=format_ms(current),
            optimal_range=baseline_range_template.format(baseline=format_ms(baseline)),
            analysis=template.format(value=format_ms(current), delta=format_percent(abs(delta))),
            status=classify_score(component.score),
        )

    def _rhr_component(self, component: RecoveryComponent) -> Optional[ComponentInsight]:
        if not component.has_baseline_comparison:
            return None
        current, baseline = component.current_value, component.baseline
        # Lower resting heart rate than baseline is better
        delta = _baseline_delta(baseline - current, baseline, RESTING_HEART_RATE)
        template = rhr_analysis['below'] if delta >= 0 else rhr_analysis['above']
        return ComponentInsight(
            metric_name=RESTING_HEART_RATE,
            user_value=format_bpm(current),
            optimal_range=baseline_range_template.format(baseline=format_bpm(baseline)),
            analysis=template.format(value=format_bpm(current), delta=format_percent(abs(delta))),
            status=classify_score(component.score),
        )

    def _sleep_component(self, component: RecoveryComponent) -> Optional[ComponentInsight]:
        if component.current_value is None:
            return None
        sleep_score = int(component.current_value)
        analysis = sleep_quality_analysis[-1][1]
        for lower_bound, text in sleep_quality_analysis:
            if component.current_value >= lower_bound:
                analysis = text
                break
        return ComponentInsight(
            metric_name=SLEEP_QUALITY,
            user_value=f"{sleep_score} / 100",
            optimal_range="",
            analysis=analysis.format(score=sleep_score),
            status=classify_score(component.score),
        )

    def _headline(self, components: List[ComponentInsight], driver: ComponentInsight,
                  limiter: ComponentInsight) -> str:
        if all(c.status in (InsightStatus.OPTIMAL, InsightStatus.GOOD) for c in components):
            return recovery_stable_headline
        # The driver only matters for spotting a single dominant component
        if driver.metric_name == limiter.metric_name:
            return recovery_mixed_headline
        return recovery_limiter_headlines.get(limiter.metric_name, recovery_limiter_headlines['default'])

    @staticmethod
    def recommendation_for(final_score: float) -> str:
        """Training recommendation for a 0-100 final recovery score."""
        for lower_bound, text in recovery_recommendations:
            if final_score >= lower_bound:
                return text
        return recovery_recommendations[-1][1]


_default_engine = RecoveryInsightEngine()


def generate_recovery_insight(result: RecoveryScoreResult) -> RecoveryInsight:
    """Generate the recovery insight with the shared engine."""
    return _default_engine.generate_insight(result)
