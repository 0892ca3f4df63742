"""
Command-line interface for the tabular profiler.

Usage:
    # Profile one file (report printed as JSON)
    tabular-profiler profile data/raw/people.csv

    # Profile every CSV in a directory
    tabular-profiler profile-dir data/raw --output-dir data/profiles

    # Write a cleaned copy
    tabular-profiler clean data/raw/people.csv --output data/clean/people.csv --strategy age=remove

    # Chart data and row search
    tabular-profiler charts data/raw/people.csv
    tabular-profiler search data/raw/people.csv "new york" --limit 20
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

import yaml

from .charts.builder import ChartBuilder
from .cleaning.cleaner import DataCleaner
from .config import Config
from .profiler.profiler import TableProfiler
from .reporting.report import filter_rows
from .utils.file_utils import load_csv, save_csv, save_json
from .utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)


def _emit(data, output: Optional[str]) -> None:
    if output:
        save_json(data, output)
    else:
        print(json.dumps(data, indent=2, default=str))


def _parse_strategies(items: List[str]) -> Dict[str, str]:
    strategies = {}
    for item in items:
        column, sep, strategy = item.partition('=')
        if not sep or not column:
            raise ValueError(f"Expected COLUMN=STRATEGY, got {item!r}")
        strategies[column] = strategy
    return strategies


def cmd_profile(args, config: Config) -> int:
    report = TableProfiler(config).summarize_file(args.file)
    _emit(report, args.output)
    return 0


def cmd_profile_dir(args, config: Config) -> int:
    reports = TableProfiler(config).run_all(args.data_dir, args.output_dir)
    print(f"\n✓ Profiled {len(reports)} files")
    print(f"✓ Outputs saved to: {args.output_dir}")
    return 0


def cmd_clean(args, config: Config) -> int:
    profiler = TableProfiler(config)
    rows = load_csv(args.file, sample_size=config.get('profiler.sample_size'))
    profiles = profiler.profile(rows)

    result = DataCleaner().clean(rows, profiles, _parse_strategies(args.strategy))
    save_csv(result.rows, args.output)

    print(f"✓ Removed {result.duplicates_removed} duplicate rows")
    for column, count in result.rows_removed.items():
        print(f"✓ Removed {count} rows missing '{column}'")
    for column, count in result.cells_filled.items():
        print(f"✓ Filled {count} cells in '{column}'")
    print(f"✓ Cleaned dataset has {len(result.rows)} rows: {args.output}")
    return 0


def cmd_charts(args, config: Config) -> int:
    rows = load_csv(args.file, sample_size=config.get('profiler.sample_size'))
    profiles = TableProfiler(config).profile(rows)
    charts = ChartBuilder(config).build_automatic(rows, profiles)
    _emit([chart.to_dict() for chart in charts], args.output)
    return 0


def cmd_search(args, config: Config) -> int:
    rows = load_csv(args.file, sample_size=config.get('profiler.sample_size'))
    matches = filter_rows(rows, args.term)
    for row in matches[:args.limit]:
        print(json.dumps(row, default=str))
    logger.info(f"Showing {min(len(matches), args.limit)} of {len(matches)} matching rows")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tabular-profiler',
        description="Infer column types and summary statistics of CSV files"
    )
    parser.add_argument('--config', default=None, help='Path to YAML config file')
    parser.add_argument('--log-level', default=None, help='Override logging level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('profile', help='Profile one CSV file')
    p.add_argument('file', help='CSV file to profile')
    p.add_argument('--output', default=None, help='Write the JSON report here instead of stdout')
    p.set_defaults(func=cmd_profile)

    p = subparsers.add_parser('profile-dir', help='Profile every CSV file in a directory')
    p.add_argument('data_dir', help='Directory with CSV files')
    p.add_argument('--output-dir', default='data/profiles', help='Directory for JSON reports')
    p.set_defaults(func=cmd_profile_dir)

    p = subparsers.add_parser('clean', help='Write a cleaned copy of a CSV file')
    p.add_argument('file', help='CSV file to clean')
    p.add_argument('--output', required=True, help='Path of the cleaned CSV')
    p.add_argument(
        '--strategy',
        action='append',
        default=[],
        metavar='COLUMN=STRATEGY',
        help='Missing-value strategy for a column: remove, mean, mode or none'
    )
    p.set_defaults(func=cmd_clean)

    p = subparsers.add_parser('charts', help='Build automatic chart data')
    p.add_argument('file', help='CSV file')
    p.add_argument('--output', default=None, help='Write the chart JSON here instead of stdout')
    p.set_defaults(func=cmd_charts)

    p = subparsers.add_parser('search', help='Print rows containing a search term')
    p.add_argument('file', help='CSV file')
    p.add_argument('term', help='Case-insensitive search text')
    p.add_argument('--limit', type=int, default=10, help='Maximum rows to print')
    p.set_defaults(func=cmd_search)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        setup_logger(level='ERROR')
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logger(
        level=args.log_level or config.get('logging.level', 'INFO'),
        log_file=config.log_file
    )

    try:
        return args.func(args, config)
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
