"""
Utility modules for the tabular profiler.
Provides common functionality for logging, file I/O, and statistics.
"""

from .logging_utils import setup_logger, get_logger
from .file_utils import load_config, load_csv, save_csv, save_json, get_file_list
from .stats_utils import (
    is_missing,
    parse_number,
    is_date_like,
    infer_column_type,
    compute_stats,
    compute_mode,
    count_unique,
)

__all__ = [
    'setup_logger',
    'get_logger',
    'load_config',
    'load_csv',
    'save_csv',
    'save_json',
    'get_file_list',
    'is_missing',
    'parse_number',
    'is_date_like',
    'infer_column_type',
    'compute_stats',
    'compute_mode',
    'count_unique',
]
