"""Prompts for asking a text-generation model about a profiled table."""

from typing import Sequence

from ..models import ColumnProfile, Table

INSIGHT_PROMPT = """You are a data analyst. Based on the following data summary and user question, provide a concise, data-backed answer.

Data Summary:
{data_summary}

Sample Data (first {sample_count} rows):
{sample_rows}

User Question: {question}

Please provide a clear, analytical response based on the data structure provided."""


def build_data_summary(profiles: Sequence[ColumnProfile]) -> str:
    """One line per column: name, type, unique and missing counts."""
    return "\n".join(
        f"{p.name} ({p.inferred_type.value}): {p.unique_count} unique values, {p.missing_count} missing"
        for p in profiles
    )


def build_sample_rows(table: Table, n: int = 5) -> str:
    """The first ``n`` rows as ``key: value`` lists, one row per line."""
    return "\n".join(
        ", ".join(f"{key}: {'' if value is None else value}" for key, value in row.items())
        for row in table[:n]
    )


def build_insight_prompt(
    profiles: Sequence[ColumnProfile],
    table: Table,
    question: str,
    sample_count: int = 5
) -> str:
    """
    Fill the analyst prompt for a question about the table.

    Raises:
        ValueError: If the question is blank
    """
    if not question or not question.strip():
        raise ValueError("Question must not be empty")

    return INSIGHT_PROMPT.format(
        data_summary=build_data_summary(profiles),
        sample_count=sample_count,
        sample_rows=build_sample_rows(table, sample_count),
        question=question.strip(),
    )
