"""
Analysis module for sleep and recovery insights.

This module contains the status classifiers and the engines that turn
score results into headline, breakdown and recommendation.
"""

from vitals_insights.core.analysis.classification import (
    InsightInputError,
    classify_range,
    classify_score,
    severity,
)
from vitals_insights.core.analysis.recovery_insights import RecoveryInsightEngine, generate_recovery_insight
from vitals_insights.core.analysis.sleep_insights import SleepInsightEngine, generate_sleep_insight

__all__ = [
    'InsightInputError', 'classify_range', 'classify_score', 'severity',
    'SleepInsightEngine', 'generate_sleep_insight',
    'RecoveryInsightEngine', 'generate_recovery_insight',
]
