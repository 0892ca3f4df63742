"""
Table Profiler

Column type inference and descriptive statistics for in-memory tables.
"""

from .profiler import TableProfiler, profile_column, profile_table

__all__ = ['TableProfiler', 'profile_column', 'profile_table']
