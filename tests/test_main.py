"""Tests for the command-line interface."""

import csv
import json

from tabular_profiler.main import main


class TestProfileCommand:
    def test_prints_report(self, duplicate_csv, capsys):
        assert main(["profile", duplicate_csv]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["row_count"] == 4
        age = report["columns"][0]
        assert age["inferred_type"] == "numeric"
        assert age["missing_count"] == 1
        assert age["stats"]["median"] == 30.0

    def test_writes_report(self, sample_csv, tmp_path):
        output = tmp_path / "report.json"
        assert main(["profile", sample_csv, "--output", str(output)]) == 0
        assert json.loads(output.read_text())["column_count"] == 4

    def test_missing_file(self, tmp_path):
        assert main(["profile", str(tmp_path / "nope.csv")]) == 1

    def test_bad_config(self, sample_csv, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("profiler:\n  date_threshold: 0.1\n")
        assert main(["--config", str(bad), "profile", sample_csv]) == 1


class TestProfileDirCommand:
    def test_profiles_directory(self, tmp_path, capsys):
        data_dir = tmp_path / "raw"
        data_dir.mkdir()
        (data_dir / "a.csv").write_text("x\n1\n2\n")
        output_dir = tmp_path / "out"

        assert main(["profile-dir", str(data_dir), "--output-dir", str(output_dir)]) == 0
        assert (output_dir / "a.profile.json").exists()
        assert "Profiled 1 files" in capsys.readouterr().out


class TestCleanCommand:
    def test_writes_cleaned_csv(self, duplicate_csv, tmp_path):
        output = tmp_path / "clean.csv"
        assert main(["clean", duplicate_csv, "--output", str(output), "--strategy", "age=remove"]) == 0

        with open(output, newline="") as f:
            rows = list(csv.DictReader(f))
        assert rows == [{"age": "25", "city": "NY"}, {"age": "30", "city": "NY"}]

    def test_bad_strategy(self, duplicate_csv, tmp_path):
        output = tmp_path / "clean.csv"
        assert main(["clean", duplicate_csv, "--output", str(output), "--strategy", "age"]) == 1
        assert main(["clean", duplicate_csv, "--output", str(output), "--strategy", "age=zero"]) == 1
        assert not output.exists()


class TestChartsCommand:
    def test_prints_charts(self, duplicate_csv, capsys):
        assert main(["charts", duplicate_csv]) == 0
        charts = json.loads(capsys.readouterr().out)
        assert [c["id"] for c in charts] == ["hist-age", "bar-city"]


class TestSearchCommand:
    def test_prints_matching_rows(self, duplicate_csv, capsys):
        assert main(["search", duplicate_csv, "la"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line) for line in lines] == [{"age": "", "city": "LA"}]

    def test_limit(self, duplicate_csv, capsys):
        assert main(["search", duplicate_csv, "ny", "--limit", "1"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 1
