"""Per-test outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkipReason(str, Enum):
    """Why a registered test case did not run."""

    SKIP_MODIFIER = "skipped"
    EXCLUDED_BY_ONLY = "excluded by only"
    EXCLUDED_BY_FILTER = "excluded by filter"


@dataclass(frozen=True)
class Pass:
    """The test body finished without an observed failure."""


@dataclass(frozen=True)
class Fail:
    """The test body produced a failed assertion result."""

    message: str
    expected: object | None = None
    actual: object | None = None


@dataclass(frozen=True)
class Skip:
    """The test case was excluded from the runnable set."""

    reason: SkipReason


Outcome = Pass | Fail | Skip


@dataclass(frozen=True)
class TestReport:
    """One reported outcome tied to the registration slot it came from."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    index: int
    name: str
    qualified_name: str
    outcome: Outcome
