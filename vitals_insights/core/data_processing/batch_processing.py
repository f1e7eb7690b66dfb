"""
Batch interpretation of score results stored in tabular files.

Each row of the input frame is one score result. Rows that fail validation
are kept in the output with an `error` message so a single bad night does
not abort the whole batch.
"""

import json
import logging
import os
from datetime import datetime

import numpy as np
import pandas as pd
from pydantic import ValidationError

from vitals_insights.core.analysis.classification import (
    InsightInputError,
    strongest_component,
    weakest_component,
)
from vitals_insights.core.analysis.recovery_insights import RecoveryInsightEngine
from vitals_insights.core.analysis.sleep_insights import SleepInsightEngine
from vitals_insights.core.models.data_models import (
    RecoveryComponent,
    RecoveryScoreResult,
    SleepScoreResult,
)

logger = logging.getLogger(__name__)

SLEEP_COLUMNS = [
    'time_asleep', 'deep_sleep', 'rem_sleep', 'sleep_efficiency',
    'time_to_fall_asleep', 'time_in_bed', 'final_score',
]

# Flat column prefix -> RecoveryScoreResult component field
RECOVERY_COMPONENT_PREFIXES = {
    'hrv': 'hrv_component',
    'rhr': 'rhr_component',
    'sleep': 'sleep_component',
    'stress': 'stress_component',
}

RECOVERY_COLUMNS = ['final_score'] + list(RECOVERY_COMPONENT_PREFIXES.values()) + [
    f"{prefix}_{suffix}"
    for prefix in RECOVERY_COMPONENT_PREFIXES
    for suffix in ('score', 'current', 'baseline')
]

OUTPUT_COLUMNS = ['headline', 'recommendation', 'weakest_metric', 'strongest_metric', 'breakdown', 'error']


def _clean_record(record):
    """Drop missing scalar values so model defaults and derivations apply"""
    values = {}
    for key, value in record.items():
        # Lists and dicts from JSON input are kept as they are
        if not pd.api.types.is_scalar(value):
            values[key] = value
        elif pd.notna(value):
            values[key] = value.item() if isinstance(value, np.generic) else value
    return values


def sleep_result_from_record(record) -> SleepScoreResult:
    """Build a SleepScoreResult from one flat row"""
    values = _clean_record(record)
    return SleepScoreResult(**{column: values[column] for column in SLEEP_COLUMNS if column in values})


def recovery_result_from_record(record) -> RecoveryScoreResult:
    """
    Build a RecoveryScoreResult from one row.

    A component is either a nested object in its `<prefix>_component` column,
    the shape the API accepts, or the flat `<prefix>_score`, `<prefix>_current`
    and `<prefix>_baseline` columns. The nested object wins when both are set,
    and a component with neither a nested object nor a score column is absent.
    """
    values = _clean_record(record)
    payload = {}
    if 'final_score' in values:
        payload['final_score'] = values['final_score']
    for prefix, field in RECOVERY_COMPONENT_PREFIXES.items():
        if isinstance(values.get(field), dict):
            payload[field] = values[field]
            continue
        if f"{prefix}_score" not in values:
            continue
        payload[field] = RecoveryComponent(
            score=values[f"{prefix}_score"],
            current_value=values.get(f"{prefix}_current"),
            baseline=values.get(f"{prefix}_baseline"),
        )
    return RecoveryScoreResult(**payload)


def _insight_row(insight, weakest, strongest):
    return {
        'headline': insight.headline,
        'recommendation': insight.recommendation,
        'weakest_metric': weakest,
        'strongest_metric': strongest,
        'breakdown': json.dumps([c.model_dump(mode='json') for c in insight.component_breakdown],
                                ensure_ascii=False),
        'error': None,
    }


def _row_builder(engine):
    def build_row(result):
        insight = engine.generate_insight(result)
        components = insight.component_breakdown
        return _insight_row(insight, weakest_component(components).metric_name,
                            strongest_component(components).metric_name)
    return build_row


def _error_row(message):
    row = {column: None for column in OUTPUT_COLUMNS}
    row['error'] = message
    return row


def _process_frame(df, build_result, build_row, input_columns):
    passthrough = [column for column in df.columns if column not in input_columns]
    rows = []
    for index, record in df.iterrows():
        try:
            row = build_row(build_result(record.to_dict()))
        except (ValidationError, InsightInputError) as e:
            logger.error(f"Skipping row {index}: {e}")
            row = _error_row(str(e))
        rows.append(row)

    output = pd.DataFrame(rows, columns=OUTPUT_COLUMNS, index=df.index)
    failed = output['error'].notna().sum()
    logger.info(f"Generated {len(output) - failed} insights, {failed} rows rejected")
    return pd.concat([df[passthrough], output], axis=1)


def generate_sleep_insights_frame(df: pd.DataFrame, engine: SleepInsightEngine = None) -> pd.DataFrame:
    """
    Generate sleep insights for every row of a DataFrame.

    Args:
        df: DataFrame with one sleep score result per row
        engine: Engine to use (a new SleepInsightEngine by default)

    Returns:
        DataFrame: Identifier columns of the input plus the insight columns
    """
    engine = engine or SleepInsightEngine()
    return _process_frame(df, sleep_result_from_record, _row_builder(engine), SLEEP_COLUMNS)


def generate_recovery_insights_frame(df: pd.DataFrame, engine: RecoveryInsightEngine = None) -> pd.DataFrame:
    """Generate recovery insights for every row of a DataFrame."""
    engine = engine or RecoveryInsightEngine()
    return _process_frame(df, recovery_result_from_record, _row_builder(engine), RECOVERY_COLUMNS)


class InsightBatchProcessor:
    """
    Reads score results from CSV or JSON files and writes the generated insights.

    Sleep files hold one flat SleepScoreResult per row. Recovery files may use
    the flat `<prefix>_score/_current/_baseline` columns or, in JSON, nested
    `<prefix>_component` objects as posted to the API.
    """

    def __init__(self, output_dir='data/insights'):
        self.output_dir = output_dir
        self.logger = logging.getLogger('InsightBatchProcessor')

    def process_file(self, input_file, kind, output_file=None):
        """
        Generate insights for every score result in a file.

        Args:
            input_file: Path to a .csv or .json file of score results
            kind: 'sleep' or 'recovery'
            output_file: Destination (.csv or .json); defaults to the output directory

        Returns:
            str: Path of the written file
        """
        if kind not in ('sleep', 'recovery'):
            raise ValueError(f"Unknown insight kind: {kind}. Must be 'sleep' or 'recovery'")

        if output_file is None:
            base_name = os.path.splitext(os.path.basename(input_file))[0]
            os.makedirs(self.output_dir, exist_ok=True)
            output_file = os.path.join(self.output_dir, f"{base_name}_insights.csv")

        self.logger.info(f"Generating {kind} insights for {input_file}")
        started_at = datetime.now()

        data = self._read(input_file)
        if kind == 'sleep':
            insights = generate_sleep_insights_frame(data)
        else:
            insights = generate_recovery_insights_frame(data)

        self._write(insights, output_file)
        elapsed = (datetime.now() - started_at).total_seconds()
        self.logger.info(f"Wrote {len(insights)} rows to {output_file} in {elapsed:.2f}s")
        return output_file

    @staticmethod
    def _read(input_file):
        file_extension = os.path.splitext(input_file)[1].lower()
        if file_extension == '.csv':
            return pd.read_csv(input_file)
        elif file_extension == '.json':
            return pd.read_json(input_file, orient='records')
        raise ValueError(f"Unsupported file format: {file_extension}")

    @staticmethod
    def _write(df, output_file):
        file_extension = os.path.splitext(output_file)[1].lower()
        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if file_extension == '.csv':
            df.to_csv(output_file, index=False)
        elif file_extension == '.json':
            df.to_json(output_file, orient='records', indent=2, force_ascii=False)
        else:
            raise ValueError(f"Unsupported file format: {file_extension}")
