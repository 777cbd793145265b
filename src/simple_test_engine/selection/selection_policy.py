"""Runnable-set selection from modifiers and an optional name filter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simple_test_engine.outcomes.test_outcomes import Skip, SkipReason, TestReport
from simple_test_engine.registration.case_models import Modifier, TestCase


@dataclass(frozen=True)
class IndexedCase:
    """Test case paired with its registration index."""

    index: int
    case: TestCase


@dataclass(frozen=True)
class Selection:
    """Runnable cases plus pre-computed skip reports, both in registration order."""

    runnable: tuple[IndexedCase, ...]
    skipped: tuple[TestReport, ...]


def select_cases(cases: Sequence[TestCase], name_filter: str | None = None) -> Selection:
    """Split registered cases into runnable ones and skip reports.

    When several exclusion rules apply to one case, the skip modifier wins over
    the only rule, which wins over the filter.
    """
    any_only = any(case.modifier is Modifier.ONLY for case in cases)
    runnable: list[IndexedCase] = []
    skipped: list[TestReport] = []
    for index, case in enumerate(cases):
        reason = _exclusion_reason(case, any_only=any_only, name_filter=name_filter)
        if reason is None:
            runnable.append(IndexedCase(index=index, case=case))
            continue
        skipped.append(
            TestReport(
                index=index,
                name=case.name,
                qualified_name=case.qualified_name,
                outcome=Skip(reason=reason),
            )
        )
    return Selection(runnable=tuple(runnable), skipped=tuple(skipped))


def _exclusion_reason(
    case: TestCase, *, any_only: bool, name_filter: str | None
) -> SkipReason | None:
    if case.modifier is Modifier.SKIP:
        return SkipReason.SKIP_MODIFIER
    if any_only and case.modifier is not Modifier.ONLY:
        return SkipReason.EXCLUDED_BY_ONLY
    if name_filter is not None and name_filter not in case.qualified_name:
        return SkipReason.EXCLUDED_BY_FILTER
    return None
