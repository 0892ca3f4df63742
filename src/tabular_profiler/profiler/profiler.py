"""
Table Profiler

Infers a semantic type for every column of a table and computes
type-appropriate summary statistics:
- numeric columns: min, max, mean, median
- categorical columns: mode
- date columns: type only

Profiling is a pure function of the rows. It never mutates them and gives
identical output when repeated on the same table.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from tqdm import tqdm

from ..config import Config
from ..models import ColumnProfile, Table, column_names, column_values
from ..reporting.report import build_report
from ..utils.file_utils import get_file_list, load_csv, save_json
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import (
    DEFAULT_DATE_THRESHOLD,
    DEFAULT_NUMERIC_THRESHOLD,
    compute_stats,
    count_unique,
    infer_column_type,
    is_missing,
)

logger = get_logger(__name__)


def profile_column(
    name: str,
    values: List[Any],
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
    date_threshold: float = DEFAULT_DATE_THRESHOLD
) -> ColumnProfile:
    """
    Profile one column from its raw cells.

    Args:
        name: Column name
        values: One raw cell per row, ``None`` for absent cells

    Returns:
        ColumnProfile for the column
    """
    inferred_type = infer_column_type(
        values,
        numeric_threshold=numeric_threshold,
        date_threshold=date_threshold
    )

    return ColumnProfile(
        name=name,
        inferred_type=inferred_type,
        missing_count=sum(1 for v in values if is_missing(v)),
        unique_count=count_unique(values),
        stats=compute_stats(name, values, inferred_type),
    )


def profile_table(
    table: Table,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
    date_threshold: float = DEFAULT_DATE_THRESHOLD
) -> List[ColumnProfile]:
    """
    Profile every column of a table.

    Columns are the keys of the first row, in that row's order. An empty
    table gives an empty list.

    Example:
        >>> rows = [{"age": "25", "city": "NY"}, {"age": "", "city": "LA"}]
        >>> [p.inferred_type.value for p in profile_table(rows)]
        ['numeric', 'categorical']
    """
    profiles = [
        profile_column(
            name,
            column_values(table, name),
            numeric_threshold=numeric_threshold,
            date_threshold=date_threshold
        )
        for name in column_names(table)
    ]
    logger.debug(f"Profiled {len(profiles)} columns over {len(table)} rows")
    return profiles


class TableProfiler:
    """
    Profiles CSV files and writes JSON reports.

    Attributes:
        config: Profiler configuration

    Example:
        >>> profiler = TableProfiler(Config())
        >>> report = profiler.summarize_file(Path("data/raw/people.csv"))
        >>> report['type_counts']
        {'numeric': 1, 'categorical': 1, 'date': 0}
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the profiler.

        Args:
            config: Configuration (defaults are used when omitted)
        """
        self.config = config or Config()
        self.numeric_threshold = self.config.get('profiler.numeric_threshold')
        self.date_threshold = self.config.get('profiler.date_threshold')

    def profile(self, table: Table) -> List[ColumnProfile]:
        """Profile an in-memory table with the configured thresholds."""
        return profile_table(
            table,
            numeric_threshold=self.numeric_threshold,
            date_threshold=self.date_threshold
        )

    def summarize_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a CSV file and build its profile report.

        Args:
            file_path: Path to CSV file

        Returns:
            Report dictionary (see ``build_report``) plus file name and path
        """
        file_path = Path(file_path)
        logger.info(f"Profiling file: {file_path.name}")

        rows = load_csv(file_path, sample_size=self.config.get('profiler.sample_size'))
        profiles = self.profile(rows)

        report = {
            'file_name': file_path.name,
            'file_path': str(file_path),
            **build_report(rows, profiles),
        }

        logger.info(f"  Profiled {report['column_count']} columns, {report['row_count']} rows")
        return report

    def run_all(
        self,
        data_dir: Union[str, Path],
        output_dir: Union[str, Path]
    ) -> List[Dict[str, Any]]:
        """
        Profile every CSV file in a directory.

        Each report is saved as ``<stem>.profile.json`` in ``output_dir``
        together with a ``profiles_index.json``. Files that cannot be read
        are logged and skipped.

        Returns:
            Reports of the files that were profiled
        """
        output_dir = Path(output_dir)
        csv_files = get_file_list(data_dir, "*.csv")

        if not csv_files:
            logger.warning(f"No CSV files found in {data_dir}")
            return []

        reports = []
        for file_path in tqdm(csv_files, desc="Profiling files"):
            try:
                report = self.summarize_file(file_path)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to profile {file_path.name}: {e}")
                continue

            reports.append(report)
            save_json(report, output_dir / f"{file_path.stem}.profile.json")

        logger.info(f"Successfully profiled {len(reports)} of {len(csv_files)} files")

        save_json(
            {
                'total_files': len(reports),
                'files': [r['file_name'] for r in reports],
            },
            output_dir / "profiles_index.json"
        )

        return reports
