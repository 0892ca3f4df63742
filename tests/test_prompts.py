"""Tests for the insight prompt."""

import pytest

from tabular_profiler.insights import build_data_summary, build_insight_prompt, build_sample_rows
from tabular_profiler.profiler import profile_table


class TestBuildDataSummary:
    def test_one_line_per_column(self, people_rows):
        summary = build_data_summary(profile_table(people_rows))
        assert summary.splitlines() == [
            "age (numeric): 2 unique values, 1 missing",
            "city (categorical): 2 unique values, 0 missing",
        ]


class TestBuildSampleRows:
    def test_first_rows_only(self, mixed_rows):
        lines = build_sample_rows(mixed_rows, n=2).splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("id: 1, name: Alice")

    def test_missing_cells_blank(self):
        assert build_sample_rows([{"a": None, "b": "x"}]) == "a: , b: x"


class TestBuildInsightPrompt:
    def test_includes_summary_sample_and_question(self, people_rows):
        prompt = build_insight_prompt(profile_table(people_rows), people_rows, "  Who is older?  ")
        assert "You are a data analyst" in prompt
        assert "age (numeric): 2 unique values, 1 missing" in prompt
        assert "age: 25, city: NY" in prompt
        assert "User Question: Who is older?" in prompt

    def test_blank_question(self, people_rows):
        with pytest.raises(ValueError):
            build_insight_prompt(profile_table(people_rows), people_rows, "   ")
