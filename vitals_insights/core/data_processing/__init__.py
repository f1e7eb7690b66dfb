"""
Data processing module for interpreting score results in bulk.
"""

from vitals_insights.core.data_processing.batch_processing import (
    InsightBatchProcessor,
    generate_recovery_insights_frame,
    generate_sleep_insights_frame,
)

__all__ = ['InsightBatchProcessor', 'generate_sleep_insights_frame', 'generate_recovery_insights_frame']
