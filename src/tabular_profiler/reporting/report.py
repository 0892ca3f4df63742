"""
Derived reporting over column profiles.

Nothing here infers or computes statistics: it only rearranges profiles
for display (completeness, counts per type, row search, a report dict).
"""

from typing import Any, Dict, List, Sequence

from ..models import ColumnProfile, ColumnType, Table, column_names
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


def completeness(profile: ColumnProfile, row_count: int) -> float:
    """
    Percentage of rows with a present value in this column.

    Args:
        profile: Column profile
        row_count: Number of rows in the profiled table

    Returns:
        Value in [0, 100]; 0.0 for an empty table
    """
    if row_count <= 0:
        return 0.0
    return (row_count - profile.missing_count) / row_count * 100


def type_counts(profiles: Sequence[ColumnProfile]) -> Dict[str, int]:
    """Number of columns per inferred type. Every type is present as a key."""
    counts = {column_type.value: 0 for column_type in ColumnType}
    for profile in profiles:
        counts[profile.inferred_type.value] += 1
    return counts


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def filter_rows(table: Table, term: str) -> List[Any]:
    """
    Case-insensitive substring search over every cell of every row.

    Args:
        table: Rows to search
        term: Search text, matched as given; empty text matches every row

    Returns:
        Matching rows in table order (the row objects themselves)

    Example:
        >>> filter_rows([{"city": "New York"}, {"city": "LA"}], "york")
        [{'city': 'New York'}]
    """
    needle = (term or "").lower()
    if not needle:
        return list(table)

    return [
        row for row in table
        if any(needle in _cell_text(value).lower() for value in row.values())
    ]


def build_report(
    table: Table,
    profiles: Sequence[ColumnProfile]
) -> Dict[str, Any]:
    """
    Assemble a JSON-ready report for a profiled table.

    Args:
        table: Profiled rows
        profiles: Output of ``profile_table(table)``

    Returns:
        Report dictionary with per-column entries, type counts and
        data-quality totals
    """
    row_count = len(table)
    columns = []
    for profile in profiles:
        entry = profile.to_dict()
        entry['completeness'] = round(completeness(profile, row_count), 2)
        columns.append(entry)

    total_cells = row_count * len(profiles)
    missing_cells = sum(p.missing_count for p in profiles)

    return {
        'row_count': row_count,
        'column_count': len(column_names(table)),
        'columns': columns,
        'type_counts': type_counts(profiles),
        'data_quality': {
            'total_cells': total_cells,
            'missing_cells': missing_cells,
            'missing_rate': missing_cells / total_cells if total_cells else 0.0,
        },
    }
