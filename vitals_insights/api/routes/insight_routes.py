# vitals_insights/api/routes/insight_routes.py
from fastapi import APIRouter, Depends, HTTPException

from vitals_insights.core.analysis.classification import InsightInputError
from vitals_insights.core.analysis.recovery_insights import RecoveryInsightEngine
from vitals_insights.core.analysis.sleep_insights import SleepInsightEngine
from vitals_insights.core.models.data_models import RecoveryScoreResult, SleepScoreResult
from vitals_insights.core.models.output_models import RecoveryInsight, SleepInsight

# Engines are stateless, so every request shares the same instances
_sleep_engine = SleepInsightEngine()
_recovery_engine = RecoveryInsightEngine()


# Dependencies
def get_sleep_engine():
    return _sleep_engine


def get_recovery_engine():
    return _recovery_engine


router = APIRouter(
    prefix="/insights",
    tags=["Insights"],
    responses={422: {"description": "Score result could not be interpreted"}}
)


@router.post("/sleep", response_model=SleepInsight)
def sleep_insight(result: SleepScoreResult, engine: SleepInsightEngine = Depends(get_sleep_engine)):
    """Generate the headline, breakdown and recommendation for one night of sleep"""
    try:
        return engine.generate_insight(result)
    except InsightInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/recovery", response_model=RecoveryInsight)
def recovery_insight(result: RecoveryScoreResult, engine: RecoveryInsightEngine = Depends(get_recovery_engine)):
    """Generate the headline, breakdown and training recommendation for a recovery score"""
    try:
        return engine.generate_insight(result)
    except InsightInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
