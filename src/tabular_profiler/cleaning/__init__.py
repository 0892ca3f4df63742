"""
Data Cleaning

Duplicate removal and missing-value handling that returns new rows.
"""

from .cleaner import CleaningResult, CleaningStrategy, DataCleaner, default_strategy

__all__ = ['CleaningResult', 'CleaningStrategy', 'DataCleaner', 'default_strategy']
