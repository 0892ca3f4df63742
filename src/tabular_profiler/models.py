"""Shared types: tables, column types and column profiles."""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

Row = Mapping[str, Any]
Table = Sequence[Row]


class ColumnType(str, Enum):
    """Inferred semantic type of a column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    DATE = "date"


class NumericStats(BaseModel):
    """Summary statistics of a numeric column."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    mean: float
    median: float = Field(
        description="Element at index len // 2 of the ascending-sorted values"
    )


class CategoricalStats(BaseModel):
    """Summary statistics of a categorical column."""

    model_config = ConfigDict(frozen=True)

    mode: str


ColumnStats = Union[NumericStats, CategoricalStats]


class ColumnProfile(BaseModel):
    """Inferred type and statistics for one column of a table."""

    model_config = ConfigDict(frozen=True)

    name: str
    inferred_type: ColumnType
    missing_count: int = Field(ge=0)
    unique_count: int = Field(ge=0)
    stats: Optional[ColumnStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def column_names(table: Table) -> List[str]:
    """Column names of a table, taken from the first row in key order."""
    if not table:
        return []
    return list(table[0].keys())


def column_values(table: Table, name: str) -> List[Any]:
    """Raw cells of one column; rows lacking the key yield ``None``."""
    return [row.get(name) for row in table]
