#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Script to generate sleep or recovery insights for a file of score results.

Usage:
    python scripts/generate_insights.py --kind sleep --input data/sleep_scores.csv
    python scripts/generate_insights.py --kind recovery --input data/recovery.json --output reports/recovery.json
"""

import os
import sys
import argparse
import logging

# Add the project root to the path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from vitals_insights.config.config_manager import ConfigManager, configure_logging
from vitals_insights.core.data_processing.batch_processing import InsightBatchProcessor

logger = logging.getLogger('generate_insights')


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Generate insights from sleep or recovery score results')

    parser.add_argument(
        '--kind',
        choices=['sleep', 'recovery'],
        required=True,
        help='Type of score results in the input file'
    )

    parser.add_argument(
        '--input',
        type=str,
        required=True,
        help='CSV or JSON file with one score result per row'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output file (.csv or .json); defaults to the configured output directory'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to the YAML configuration file'
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)
    configure_logging(config)

    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        return 1

    processor = InsightBatchProcessor(output_dir=config.get('batch.output_dir', 'data/insights'))
    try:
        output_file = processor.process_file(args.input, args.kind, args.output)
    except ValueError as e:
        logger.error(str(e))
        return 1

    print(f"Insights written to {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
