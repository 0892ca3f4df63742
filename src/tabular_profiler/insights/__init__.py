"""Prompt building for questions about a profiled table."""

from .prompts import INSIGHT_PROMPT, build_data_summary, build_insight_prompt, build_sample_rows

__all__ = ['INSIGHT_PROMPT', 'build_data_summary', 'build_insight_prompt', 'build_sample_rows']
