# vitals_insights/core/models/output_models.py

from pydantic import BaseModel, ConfigDict
from typing import List

from vitals_insights.core.models.data_models import InsightStatus


class ComponentInsight(BaseModel):
    """One row of an insight breakdown, describing a single metric"""
    model_config = ConfigDict(frozen=True)

    metric_name: str
    user_value: str
    optimal_range: str
    analysis: str
    status: InsightStatus


class Insight(BaseModel):
    """Three-layer insight: headline, per-component breakdown, recommendation"""
    model_config = ConfigDict(frozen=True)

    headline: str
    component_breakdown: List[ComponentInsight] = []
    recommendation: str


class SleepInsight(Insight):
    """Insight for a single night of sleep"""


class RecoveryInsight(Insight):
    """Insight for a single recovery score"""
