"""Tests for table profiling."""

import copy
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tabular_profiler.config import Config
from tabular_profiler.models import CategoricalStats, ColumnType, NumericStats
from tabular_profiler.profiler import TableProfiler, profile_column, profile_table


class TestProfileTable:
    def test_end_to_end_scenario(self, people_rows):
        age, city = profile_table(people_rows)

        assert age.name == "age"
        assert age.inferred_type == ColumnType.NUMERIC
        assert age.missing_count == 1
        assert age.unique_count == 2
        assert age.stats.mean == 27.5

        assert city.name == "city"
        assert city.inferred_type == ColumnType.CATEGORICAL
        assert city.missing_count == 0
        assert city.unique_count == 2
        assert city.stats == CategoricalStats(mode="NY")

    def test_order_follows_first_row_keys(self):
        rows = [{"z": "1", "a": "x", "m": "2024-01-01"}, {"z": "2", "a": "y", "m": "2024-02-01"}]
        assert [p.name for p in profile_table(rows)] == ["z", "a", "m"]

    def test_empty_table(self):
        assert profile_table([]) == []

    def test_absent_keys_count_as_missing(self):
        rows = [{"a": "1", "b": "x"}, {"a": "2"}, {"a": "3", "b": None}]
        _, b = profile_table(rows)
        assert b.missing_count == 2
        assert b.unique_count == 1

    def test_keys_only_in_later_rows_are_ignored(self):
        rows = [{"a": "1"}, {"a": "2", "extra": "x"}]
        assert [p.name for p in profile_table(rows)] == ["a"]

    def test_all_missing_column(self):
        rows = [{"a": ""}, {"a": None}, {}]
        (profile,) = profile_table(rows)
        assert profile.inferred_type == ColumnType.CATEGORICAL
        assert profile.missing_count == 3
        assert profile.unique_count == 0
        assert profile.stats is None
        assert rows[2] == {}

    def test_missing_plus_present_equals_row_count(self, mixed_rows):
        for profile in profile_table(mixed_rows):
            present = sum(1 for row in mixed_rows if row.get(profile.name) not in (None, ""))
            assert profile.missing_count + present == len(mixed_rows)

    def test_unparseable_cells_are_not_missing(self):
        rows = [{"n": v} for v in ["1", "2", "3", "4", "5", "bad"]]
        (profile,) = profile_table(rows)
        assert profile.inferred_type == ColumnType.NUMERIC
        assert profile.missing_count == 0
        assert profile.stats.mean == 3.0

    def test_mixed_types(self, mixed_rows):
        types = {p.name: p.inferred_type for p in profile_table(mixed_rows)}
        assert types == {
            "id": ColumnType.NUMERIC,
            "name": ColumnType.CATEGORICAL,
            "score": ColumnType.NUMERIC,
            "joined": ColumnType.DATE,
            "team": ColumnType.CATEGORICAL,
        }

    def test_date_column_has_no_stats(self, mixed_rows):
        joined = next(p for p in profile_table(mixed_rows) if p.name == "joined")
        assert joined.stats is None

    def test_idempotent(self, mixed_rows):
        assert profile_table(mixed_rows) == profile_table(mixed_rows)

    def test_does_not_mutate_rows(self, mixed_rows):
        before = copy.deepcopy(mixed_rows)
        profile_table(mixed_rows)
        assert mixed_rows == before

    def test_date_threshold_argument(self):
        rows = [{"d": v} for v in ["2024-01-01", "2024-01-02", "2024-01-03", "x", "y"]]
        assert profile_table(rows)[0].inferred_type == ColumnType.CATEGORICAL
        assert profile_table(rows, date_threshold=0.55)[0].inferred_type == ColumnType.DATE


class TestProfileColumn:
    def test_numeric_profile(self):
        profile = profile_column("n", ["1", "2", "3", "4"])
        assert profile.stats == NumericStats(min=1.0, max=4.0, mean=2.5, median=3.0)

    def test_profile_is_frozen(self):
        profile = profile_column("n", ["1"])
        with pytest.raises(ValidationError):
            profile.missing_count = 5

    def test_to_dict_uses_plain_values(self):
        data = profile_column("c", ["a", "a", "b"]).to_dict()
        assert data == {
            "name": "c",
            "inferred_type": "categorical",
            "missing_count": 0,
            "unique_count": 2,
            "stats": {"mode": "a"},
        }


class TestTableProfiler:
    def test_summarize_file(self, sample_csv):
        report = TableProfiler(Config()).summarize_file(sample_csv)

        assert report["file_name"] == Path(sample_csv).name
        assert report["row_count"] == 5
        assert report["column_count"] == 4
        assert [c["name"] for c in report["columns"]] == ["id", "name", "age", "score"]

        score = report["columns"][3]
        assert score["inferred_type"] == "numeric"
        assert score["missing_count"] == 1
        assert score["completeness"] == 80.0

    def test_uses_configured_thresholds(self):
        config = Config()
        config.set("profiler.date_threshold", 0.6)
        profiler = TableProfiler(config)
        rows = [{"d": v} for v in ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "x"]]
        assert profiler.profile(rows)[0].inferred_type == ColumnType.DATE

    def test_run_all_writes_reports(self, sample_csv, tmp_path):
        data_dir = tmp_path / "raw"
        data_dir.mkdir()
        (data_dir / "people.csv").write_text(Path(sample_csv).read_text())
        (data_dir / "cities.csv").write_text("city\nNY\nLA\n")
        output_dir = tmp_path / "profiles"

        reports = TableProfiler(Config()).run_all(data_dir, output_dir)

        assert [r["file_name"] for r in reports] == ["cities.csv", "people.csv"]
        written = output_dir / "people.profile.json"
        assert json.loads(written.read_text())["row_count"] == 5
        index = json.loads((output_dir / "profiles_index.json").read_text())
        assert index == {"total_files": 2, "files": ["cities.csv", "people.csv"]}

    def test_run_all_empty_directory(self, tmp_path):
        assert TableProfiler(Config()).run_all(tmp_path, tmp_path / "out") == []

    def test_run_all_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TableProfiler(Config()).run_all(tmp_path / "nope", tmp_path / "out")
