"""Aggregation domain exports."""

from .run_summary import RunSummary, summarize

__all__ = ["RunSummary", "summarize"]
