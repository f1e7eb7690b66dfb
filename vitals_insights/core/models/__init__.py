"""
Data models for score results consumed by the insight engines and the
insights they produce.
"""

from vitals_insights.core.models.data_models import (
    InsightStatus,
    RecoveryComponent,
    RecoveryScoreResult,
    SleepScoreResult,
)
from vitals_insights.core.models.output_models import (
    ComponentInsight,
    Insight,
    RecoveryInsight,
    SleepInsight,
)

__all__ = [
    'InsightStatus', 'SleepScoreResult', 'RecoveryComponent', 'RecoveryScoreResult',
    'ComponentInsight', 'Insight', 'SleepInsight', 'RecoveryInsight',
]
