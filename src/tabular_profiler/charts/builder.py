"""
Chart Data

Builds chart data for a profiled table. Rendering is left to the caller;
a ChartSpec only says what to draw:
- a histogram for each numeric column
- a frequency bar chart for each categorical column with few distinct values
- a custom chart over two user-selected columns
"""

from collections import Counter
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..config import Config
from ..models import ColumnProfile, ColumnType, Table, column_names, column_values
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import non_missing, parse_number

logger = get_logger(__name__)


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    SCATTER = "scatter"
    PIE = "pie"
    HISTOGRAM = "histogram"


class ChartSpec(BaseModel):
    """Data and axes of one chart."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: ChartType
    title: str
    x_axis: Optional[str] = None
    y_axis: Optional[str] = None
    data: List[Dict[str, Any]] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def histogram_data(values: Sequence[Any], bins: int = 10) -> List[Dict[str, Any]]:
    """
    Equal-width histogram over the values that parse as numbers.

    The top edge belongs to the last bin, so the maximum is always counted.
    A constant column gives a single bin.

    Returns:
        One ``{"range", "count", "value"}`` dict per bin, ``value`` being
        the bin midpoint
    """
    numbers = np.array(
        [n for n in (parse_number(v) for v in values) if n is not None],
        dtype=float
    )
    if numbers.size == 0:
        return []

    low, high = float(numbers.min()), float(numbers.max())
    if low == high:
        return [{'range': f"{low:.1f}-{high:.1f}", 'count': int(numbers.size), 'value': low}]

    counts, edges = np.histogram(numbers, bins=bins, range=(low, high))
    return [
        {
            'range': f"{edges[i]:.1f}-{edges[i + 1]:.1f}",
            'count': int(counts[i]),
            'value': float((edges[i] + edges[i + 1]) / 2),
        }
        for i in range(len(counts))
    ]


def frequency_data(values: Sequence[Any]) -> List[Dict[str, Any]]:
    """
    Count of each present value, most frequent first.

    Equal counts keep the order in which values were first seen.
    """
    counts = Counter(non_missing(values))
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [{'category': str(value), 'count': count} for value, count in ordered]


class ChartBuilder:
    """
    Builds automatic and custom charts for a table.

    Example:
        >>> builder = ChartBuilder(Config())
        >>> [chart.id for chart in builder.build_automatic(rows, profiles)]
        ['hist-age', 'bar-city']
    """

    def __init__(self, config: Optional[Config] = None):
        config = config or Config()
        self.bins = int(config.get('charts.histogram_bins'))
        self.max_categories = int(config.get('charts.max_categories'))

    def build_automatic(
        self,
        table: Table,
        profiles: Sequence[ColumnProfile]
    ) -> List[ChartSpec]:
        """
        Default charts for every column that has one.

        Date columns and categorical columns with more than
        ``charts.max_categories`` distinct values are skipped.
        """
        charts = []

        for profile in profiles:
            values = column_values(table, profile.name)

            if profile.inferred_type == ColumnType.NUMERIC:
                data = histogram_data(values, bins=self.bins)
                if not data:
                    continue
                charts.append(ChartSpec(
                    id=f"hist-{profile.name}",
                    type=ChartType.HISTOGRAM,
                    title=f"Distribution of {profile.name}",
                    x_axis='range',
                    y_axis='count',
                    data=data,
                ))

            elif (profile.inferred_type == ColumnType.CATEGORICAL
                    and 0 < profile.unique_count <= self.max_categories):
                charts.append(ChartSpec(
                    id=f"bar-{profile.name}",
                    type=ChartType.BAR,
                    title=f"Frequency of {profile.name}",
                    x_axis='category',
                    y_axis='count',
                    data=frequency_data(values),
                ))

        logger.debug(f"Built {len(charts)} automatic charts")
        return charts

    def build_custom(
        self,
        table: Table,
        chart_type: str,
        x_axis: str,
        y_axis: str
    ) -> ChartSpec:
        """
        Chart of one column against another.

        The y values are parsed as numbers; cells that do not parse become
        ``None``.

        Raises:
            ValueError: If the chart type or a column is unknown, or both
                axes name the same column
        """
        kind = ChartType(chart_type)
        if x_axis == y_axis:
            raise ValueError(f"x and y axes must differ, both are {x_axis!r}")

        columns = column_names(table)
        for axis in (x_axis, y_axis):
            if axis not in columns:
                raise ValueError(f"Unknown column: {axis!r}")

        data = [
            {x_axis: row.get(x_axis), y_axis: parse_number(row.get(y_axis))}
            for row in table
        ]

        return ChartSpec(
            id=f"custom-{kind.value}-{x_axis}-{y_axis}",
            type=kind,
            title=f"{y_axis} by {x_axis}",
            x_axis=x_axis,
            y_axis=y_axis,
            data=data,
        )
