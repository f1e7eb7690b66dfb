import pytest

from vitals_insights.core.models.data_models import (
    RecoveryComponent,
    RecoveryScoreResult,
    SleepScoreResult,
)


def make_sleep_result(**overrides) -> SleepScoreResult:
    """A 7.5h night where every metric sits inside its optimal range."""
    values = {
        "time_asleep": 27000,
        "deep_sleep": 4500,
        "rem_sleep": 6000,
        "sleep_efficiency": 0.93,
        "time_to_fall_asleep": 10,
    }
    values.update(overrides)
    return SleepScoreResult(**values)


def make_recovery_result(final_score=78, hrv=None, rhr=None, sleep=None, stress=None) -> RecoveryScoreResult:
    return RecoveryScoreResult(
        final_score=final_score,
        hrv_component=hrv or RecoveryComponent(score=92, current_value=70, baseline=62.1),
        rhr_component=rhr or RecoveryComponent(score=85, current_value=58, baseline=60.4),
        sleep_component=sleep or RecoveryComponent(score=60, current_value=60),
        stress_component=stress,
    )


@pytest.fixture
def balanced_night():
    return make_sleep_result()


@pytest.fixture
def mixed_recovery():
    return make_recovery_result()
