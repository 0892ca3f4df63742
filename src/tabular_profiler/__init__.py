"""
Tabular Profiler

Infers column types of uploaded CSV tables and computes descriptive
statistics, with cleaning, chart data and reporting on top.
"""

from .models import CategoricalStats, ColumnProfile, ColumnType, NumericStats
from .profiler import TableProfiler, profile_table
from .utils.stats_utils import compute_stats, infer_column_type

__version__ = "0.1.0"

__all__ = [
    'CategoricalStats',
    'ColumnProfile',
    'ColumnType',
    'NumericStats',
    'TableProfiler',
    'profile_table',
    'compute_stats',
    'infer_column_type',
]
