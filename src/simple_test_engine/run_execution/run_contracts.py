"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from simple_test_engine.aggregation.run_summary import RunSummary
from simple_test_engine.outcomes.test_outcomes import TestReport


@dataclass(frozen=True)
class RunOptions:
    """Input contract for one run."""

    name_filter: str | None = None
    fail_fast: bool = False


@dataclass(frozen=True)
class RunResults:
    """Ordered reports and their summary for one completed run."""

    reports: tuple[TestReport, ...]
    summary: RunSummary

    @property
    def success(self) -> bool:
        return self.summary.success
