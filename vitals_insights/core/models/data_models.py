# vitals_insights/core/models/data_models.py

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
from datetime import date
from enum import Enum

from vitals_insights.utils.constants import sleep_score_directives


class InsightStatus(str, Enum):
    OPTIMAL = "optimal"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# Score result models are finalized upstream and never mutated here
class ScoreModel(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


# Sleep Score Models
class SleepScoreResult(ScoreModel):
    """One finalized night of sleep scoring. Durations are in seconds."""
    time_asleep: float = Field(..., ge=0.0)
    deep_sleep: float = Field(..., ge=0.0)
    rem_sleep: float = Field(..., ge=0.0)
    sleep_efficiency: float = Field(..., ge=0.0, le=1.0)
    time_to_fall_asleep: float = Field(..., ge=0.0)  # minutes
    time_in_bed: Optional[float] = Field(None, ge=0.0)
    final_score: Optional[int] = Field(None, ge=0, le=100)

    @model_validator(mode='before')
    @classmethod
    def derive_time_to_fall_asleep(cls, data):
        # Estimate onset from the gap between time in bed and time asleep
        if isinstance(data, dict) and data.get('time_to_fall_asleep') is None:
            time_in_bed = data.get('time_in_bed')
            time_asleep = data.get('time_asleep')
            if time_in_bed is not None and time_asleep is not None:
                data = dict(data)
                data['time_to_fall_asleep'] = max(0.0, (float(time_in_bed) - float(time_asleep)) / 60)
        return data

    @property
    def core_sleep(self) -> float:
        return max(0.0, self.time_asleep - self.deep_sleep - self.rem_sleep)

    @property
    def directive(self) -> Optional[str]:
        """Nightly directive for the final score band, if a score is known."""
        if self.final_score is None:
            return None
        for lower_bound, text in sleep_score_directives:
            if self.final_score >= lower_bound:
                return text
        return sleep_score_directives[-1][1]


# Recovery Score Models
class RecoveryComponent(ScoreModel):
    score: float = Field(..., ge=0.0, le=100.0)
    current_value: Optional[float] = None
    baseline: Optional[float] = Field(None, gt=0.0)
    weight: Optional[float] = Field(None, ge=0.0, le=1.0)
    contribution: Optional[float] = None
    description: str = ""

    @property
    def has_baseline_comparison(self) -> bool:
        return self.current_value is not None and self.baseline is not None


class RecoveryScoreResult(ScoreModel):
    """One finalized recovery scoring run with its per-component sub-results."""
    final_score: float = Field(..., ge=0.0, le=100.0)
    hrv_component: RecoveryComponent
    rhr_component: RecoveryComponent
    sleep_component: RecoveryComponent
    stress_component: Optional[RecoveryComponent] = None
    score_date: Optional[date] = None
    directive: Optional[str] = None

    @field_validator('sleep_component')
    @classmethod
    def validate_sleep_component(cls, v):
        if v.current_value is not None and not 0 <= v.current_value <= 100:
            raise ValueError('Sleep component current_value must be a 0-100 sleep score')
        return v
