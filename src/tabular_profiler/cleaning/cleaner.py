"""
Data Cleaner

Produces a cleaned copy of a table:
- exact duplicate rows are dropped (first occurrence kept)
- missing cells are handled per column: remove the row, fill with the
  column mean, fill with the column mode, or leave as is

The source rows are never modified.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models import ColumnProfile, ColumnType, Table
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import compute_mode, is_missing, parse_number

logger = get_logger(__name__)


class CleaningStrategy(str, Enum):
    """How missing cells of a column are handled."""

    REMOVE = "remove"
    MEAN = "mean"
    MODE = "mode"
    NONE = "none"


class CleaningResult(BaseModel):
    """Cleaned rows and what was changed to get them."""

    model_config = ConfigDict(frozen=True)

    rows: List[Dict[str, Any]]
    duplicates_removed: int = 0
    rows_removed: Dict[str, int] = Field(default_factory=dict)
    cells_filled: Dict[str, int] = Field(default_factory=dict)


def default_strategy(profile: ColumnProfile) -> CleaningStrategy:
    """
    Strategy suggested for a column before the user picks one.

    Columns without missing cells are left alone; numeric columns are
    mean-filled and every other column is mode-filled.
    """
    if profile.missing_count == 0:
        return CleaningStrategy.NONE
    if profile.inferred_type == ColumnType.NUMERIC:
        return CleaningStrategy.MEAN
    return CleaningStrategy.MODE


def _dedupe(rows: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    seen = set()
    unique = []
    for row in rows:
        key = tuple(row.items())
        if key in seen:
            continue
        seen.add(key)
        unique.append(dict(row))
    return unique


class DataCleaner:
    """
    Applies duplicate removal and per-column missing-value strategies.

    Example:
        >>> cleaner = DataCleaner()
        >>> result = cleaner.clean(rows, profiles, {"age": "remove"})
        >>> len(result.rows)
        2
    """

    def __init__(self, decimals: int = 2):
        """
        Args:
            decimals: Decimal places of the text written by mean fills
        """
        self.decimals = decimals

    def clean(
        self,
        table: Table,
        profiles: Sequence[ColumnProfile],
        strategies: Optional[Mapping[str, Union[str, CleaningStrategy]]] = None
    ) -> CleaningResult:
        """
        Build a cleaned copy of a table.

        Args:
            table: Source rows (left untouched)
            profiles: Profiles of the source rows, in column order
            strategies: Strategy per column name; columns not listed get
                :func:`default_strategy`

        Returns:
            CleaningResult with the new rows and change counts

        Raises:
            ValueError: If a strategy name is unknown
        """
        chosen = {
            name: CleaningStrategy(strategy)
            for name, strategy in (strategies or {}).items()
        }

        rows = _dedupe(table)
        duplicates_removed = len(table) - len(rows)
        if duplicates_removed:
            logger.info(f"Removed {duplicates_removed} duplicate rows")

        rows_removed: Dict[str, int] = {}
        cells_filled: Dict[str, int] = {}

        for profile in profiles:
            strategy = chosen.get(profile.name, default_strategy(profile))
            name = profile.name

            if strategy == CleaningStrategy.NONE:
                continue

            if strategy == CleaningStrategy.REMOVE:
                kept = [row for row in rows if not is_missing(row.get(name))]
                rows_removed[name] = len(rows) - len(kept)
                rows = kept
                continue

            fill = self._fill_value(profile, rows, strategy)
            if fill is None:
                continue

            filled = 0
            for row in rows:
                if is_missing(row.get(name)):
                    row[name] = fill
                    filled += 1
            cells_filled[name] = filled

        logger.info(f"Cleaned dataset has {len(rows)} rows")

        return CleaningResult(
            rows=rows,
            duplicates_removed=duplicates_removed,
            rows_removed=rows_removed,
            cells_filled=cells_filled,
        )

    def _fill_value(
        self,
        profile: ColumnProfile,
        rows: List[Dict[str, Any]],
        strategy: CleaningStrategy
    ) -> Optional[Any]:
        values = [row.get(profile.name) for row in rows]

        if strategy == CleaningStrategy.MEAN:
            if profile.inferred_type != ColumnType.NUMERIC:
                logger.warning(
                    f"Mean fill skipped for '{profile.name}': column is {profile.inferred_type.value}"
                )
                return None
            numbers = [n for n in (parse_number(v) for v in values) if n is not None]
            if not numbers:
                logger.warning(f"Mean fill skipped for '{profile.name}': no numeric values")
                return None
            return f"{sum(numbers) / len(numbers):.{self.decimals}f}"

        mode = compute_mode(values)
        if mode is None:
            logger.warning(f"Mode fill skipped for '{profile.name}': no present values")
        return mode
