"""Shared fixtures for profiler tests."""

import csv
import logging
import os
import tempfile

import pytest

from tabular_profiler.utils.logging_utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides from leaking into Config()."""
    for name in ("PROFILER_NUMERIC_THRESHOLD", "PROFILER_DATE_THRESHOLD", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams captured during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def people_rows():
    """The end-to-end table: one numeric and one categorical column."""
    return [
        {"age": "25", "city": "NY"},
        {"age": "30", "city": "NY"},
        {"age": "", "city": "LA"},
    ]


@pytest.fixture
def mixed_rows():
    """Rows covering every column type, missing cells and a duplicate."""
    return [
        {"id": "1", "name": "Alice", "score": "85.5", "joined": "2023-01-15", "team": "red"},
        {"id": "2", "name": "Bob", "score": "92.0", "joined": "2023-02-20", "team": "blue"},
        {"id": "3", "name": "Charlie", "score": "", "joined": "2023-03-05", "team": "red"},
        {"id": "4", "name": "Diana", "score": "78.3", "joined": "2023-04-11", "team": ""},
        {"id": "5", "name": "Eve", "score": "95.1", "joined": "2023-05-30", "team": "red"},
        {"id": "5", "name": "Eve", "score": "95.1", "joined": "2023-05-30", "team": "red"},
    ]


def _write_csv(header, rows):
    tmp = tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False, newline="")
    writer = csv.writer(tmp)
    writer.writerow(header)
    for row in rows:
        writer.writerow(row)
    tmp.close()
    return tmp.name


@pytest.fixture
def sample_csv():
    """Create a temporary CSV file and return its path. Cleaned up after test."""
    path = _write_csv(
        ["id", "name", "age", "score"],
        [
            [1, "Alice", 30, 85.5],
            [2, "Bob", 25, 92.0],
            [3, "Charlie", 35, 78.3],
            [4, "Diana", 28, ""],
            [5, "Eve", 22, 95.1],
        ],
    )
    yield path
    os.unlink(path)


@pytest.fixture
def duplicate_csv():
    """CSV with a repeated row and a missing numeric cell."""
    path = _write_csv(
        ["age", "city"],
        [["25", "NY"], ["30", "NY"], ["", "LA"], ["30", "NY"]],
    )
    yield path
    os.unlink(path)
