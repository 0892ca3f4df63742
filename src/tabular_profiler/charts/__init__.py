"""
Charts

Chart data for profiled tables (no rendering).
"""

from .builder import ChartBuilder, ChartSpec, ChartType, frequency_data, histogram_data

__all__ = ['ChartBuilder', 'ChartSpec', 'ChartType', 'frequency_data', 'histogram_data']
