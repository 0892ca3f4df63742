"""
File I/O utilities for the tabular profiler.
Handles loading CSV tables and YAML config, and saving JSON and CSV output.
"""

import json
import yaml
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
from .logging_utils import get_logger

logger = get_logger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info(f"Loading config from: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def load_csv(
    file_path: Union[str, Path],
    sample_size: Optional[int] = None,
    **kwargs
) -> List[Dict[str, Any]]:
    """
    Load a CSV file as a list of row dicts.

    Every cell is read as a string and empty cells stay ``""``, so the
    profiler sees the raw values the file contains. Blank lines are skipped.

    Args:
        file_path: Path to CSV file
        sample_size: Number of rows to load (None = all rows)
        **kwargs: Additional arguments passed to pd.read_csv

    Returns:
        Rows in file order, keyed by header name

    Example:
        >>> rows = load_csv("data/raw/people.csv")
        >>> rows[0]
        {'age': '25', 'city': 'NY'}
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    logger.info(f"Loading CSV: {file_path}")

    try:
        df = pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            nrows=sample_size,
            **kwargs
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"CSV file has no header or rows: {file_path}")
        return []

    rows = df.to_dict(orient='records')
    logger.info(f"Loaded {len(rows)} rows with {len(df.columns)} columns")

    return rows


def save_csv(rows: Sequence[Dict[str, Any]], file_path: Union[str, Path]) -> None:
    """
    Save rows to a CSV file, using the first row's keys as the header.

    Args:
        rows: Rows to write
        file_path: Output file path
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    columns = list(rows[0].keys()) if rows else []
    df = pd.DataFrame(list(rows), columns=columns)
    df.to_csv(file_path, index=False)

    logger.info(f"Saved {len(df)} rows to: {file_path}")


def save_json(
    data: Union[Dict, List],
    file_path: Union[str, Path],
    indent: int = 2
) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save (dict or list)
        file_path: Output file path
        indent: JSON indentation (default: 2)

    Example:
        >>> save_json({"file": "people.csv", "rows": 3}, "out/people.profile.json")
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w') as f:
        json.dump(data, f, indent=indent, default=str)

    logger.info(f"Saved JSON to: {file_path}")


def get_file_list(
    directory: Union[str, Path],
    pattern: str = "*.csv"
) -> List[Path]:
    """
    Get list of files matching pattern in directory.

    Args:
        directory: Directory to search
        pattern: Glob pattern (default: "*.csv")

    Returns:
        Sorted list of matching file paths
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    files = sorted(directory.glob(pattern))
    logger.info(f"Found {len(files)} files matching '{pattern}' in {directory}")

    return files
