"""
Statistical utilities for the tabular profiler.
Provides missing-value detection, number and date sniffing, column type
inference and per-type summary statistics.
"""

import datetime
import math
import re
from collections import Counter
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np
from dateutil import parser as date_parser

from ..models import CategoricalStats, ColumnStats, ColumnType, NumericStats
from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_NUMERIC_THRESHOLD = 0.8
DEFAULT_DATE_THRESHOLD = 0.8

# Plain decimal notation only: no underscores, no "nan"/"inf" words
_DECIMAL_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def is_missing(value: Any) -> bool:
    """
    Check whether a raw cell counts as missing.

    Only ``None`` and the empty string are missing; absent keys reach here
    as ``None``. Whitespace-only strings are present values.
    """
    return value is None or (isinstance(value, str) and value == "")


def non_missing(values: Iterable[Any]) -> List[Any]:
    """Return the present values, in order."""
    return [v for v in values if not is_missing(v)]


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a raw cell as a finite number.

    Strings are trimmed and must be a plain decimal literal in full, so
    ``"12abc"`` and ``"$5"`` do not parse.

    Args:
        value: Raw cell value

    Returns:
        The number as a float, or None if it does not parse or is not finite

    Example:
        >>> parse_number(" 2.5 ")
        2.5
        >>> parse_number("2.5kg") is None
        True
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            return None
        number = float(text)
    else:
        return None

    return number if math.isfinite(number) else None


def is_date_like(value: Any) -> bool:
    """
    Check whether a raw cell parses as a calendar date.

    Uses dateutil's permissive parser. Bare numbers are never dates, even
    though the parser would read ``"25"`` as a day of the current month.
    """
    if isinstance(value, (datetime.date, datetime.datetime)):
        return True
    if not isinstance(value, str):
        return False

    text = value.strip()
    if not text or parse_number(text) is not None:
        return False

    try:
        date_parser.parse(text)
    except (ValueError, OverflowError):
        return False
    return True


def infer_column_type(
    values: Sequence[Any],
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
    date_threshold: float = DEFAULT_DATE_THRESHOLD
) -> ColumnType:
    """
    Infer the type of a column from its raw cells.

    Args:
        values: Raw cell values, missing ones included
        numeric_threshold: Share of present values that must be numbers
        date_threshold: Share of present values that must be dates

    Returns:
        ColumnType.NUMERIC, ColumnType.DATE or ColumnType.CATEGORICAL.
        A column without present values is categorical.

    Example:
        >>> infer_column_type(["1", "2", "x", "4", "5", "6"])
        <ColumnType.NUMERIC: 'numeric'>
    """
    present = non_missing(values)
    if not present:
        return ColumnType.CATEGORICAL

    numeric_count = sum(1 for v in present if parse_number(v) is not None)
    if numeric_count / len(present) > numeric_threshold:
        return ColumnType.NUMERIC

    date_count = sum(1 for v in present if is_date_like(v))
    if date_count / len(present) > date_threshold:
        return ColumnType.DATE

    return ColumnType.CATEGORICAL


def count_unique(values: Iterable[Any]) -> int:
    """Count distinct present values by value equality ("1" != "1.0")."""
    return len(set(non_missing(values)))


def compute_mode(values: Iterable[Any]) -> Optional[Any]:
    """
    Most frequent present value.

    Ties go to the value seen first: the running winner is only replaced
    when another value's count is strictly higher.
    """
    counts = Counter(non_missing(values))

    mode = None
    best = 0
    for value, count in counts.items():
        if count > best:
            mode, best = value, count

    return mode


def compute_numeric_stats(values: Iterable[Any]) -> Optional[NumericStats]:
    """
    Compute min, max, mean and median over the values that parse as numbers.

    Cells that are present but unparseable are dropped from the population
    without being counted as missing. The median is the element at index
    ``len // 2`` of the sorted population, so ``[1, 2, 3, 4]`` gives 3.

    Returns:
        NumericStats, or None when nothing parses
    """
    parsed = [n for n in (parse_number(v) for v in non_missing(values)) if n is not None]
    if not parsed:
        return None

    arr = np.sort(np.array(parsed, dtype=float))
    return NumericStats(
        min=float(arr[0]),
        max=float(arr[-1]),
        mean=float(arr.sum() / arr.size),
        median=float(arr[arr.size // 2]),
    )


def compute_stats(
    column_name: str,
    values: Sequence[Any],
    inferred_type: ColumnType
) -> Optional[ColumnStats]:
    """
    Calculate type-dependent statistics for a column.

    Args:
        column_name: Column name (used for logging)
        values: Raw cell values
        inferred_type: Type returned by :func:`infer_column_type`

    Returns:
        NumericStats for numeric columns, CategoricalStats for categorical
        ones, None for date columns and columns without usable values
    """
    if inferred_type == ColumnType.NUMERIC:
        stats = compute_numeric_stats(values)
        if stats is None:
            logger.debug(f"Column '{column_name}' has no parseable numbers")
        return stats

    if inferred_type == ColumnType.CATEGORICAL:
        mode = compute_mode(values)
        if mode is None:
            logger.debug(f"Column '{column_name}' has no present values")
            return None
        return CategoricalStats(mode=str(mode))

    return None
