"""
Reporting

Completeness, type counts, row search and report assembly for profiled tables.
"""

from .report import build_report, completeness, filter_rows, type_counts

__all__ = ['build_report', 'completeness', 'filter_rows', 'type_counts']
