"""Outcome aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from simple_test_engine.outcomes.test_outcomes import Fail, Outcome, Pass, Skip


@dataclass(frozen=True)
class RunSummary:
    """Counts derived from one run's outcomes.

    Cases cut off by fail-fast have no outcome and are not counted anywhere.
    """

    passed: int
    failed: int
    skipped: int

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped

    @property
    def success(self) -> bool:
        return self.failed == 0


def summarize(outcomes: Iterable[Outcome]) -> RunSummary:
    """Fold outcomes into pass/fail/skip counts."""
    passed = failed = skipped = 0
    for outcome in outcomes:
        if isinstance(outcome, Pass):
            passed += 1
        elif isinstance(outcome, Fail):
            failed += 1
        elif isinstance(outcome, Skip):
            skipped += 1
        else:
            raise TypeError(f"Unsupported outcome: {outcome!r}")
    return RunSummary(passed=passed, failed=failed, skipped=skipped)
