
"""
Insight generation for the Vitals health tracker.

This package turns already computed scores into user-facing text:
- Qualitative classification of sleep and recovery metrics
- Sleep insights (headline, breakdown, recommendation)
- Recovery insights with a training recommendation
- Batch processing and an HTTP interface
"""

from vitals_insights.core.analysis import generate_recovery_insight, generate_sleep_insight

__all__ = ['generate_sleep_insight', 'generate_recovery_insight']
