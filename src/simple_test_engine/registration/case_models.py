"""Registration entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

TestBody = Callable[[], object]
HookProcedure = Callable[[], object]


class RegistrationError(Exception):
    """Raised for malformed registrations or registration into a context that already ran."""


class Modifier(str, Enum):
    """Controls whether a test case takes part in selection."""

    NORMAL = "normal"
    SKIP = "skip"
    ONLY = "only"


class HookKind(str, Enum):
    """Lifecycle points at which hooks run."""

    BEFORE_ALL = "before_all"
    AFTER_ALL = "after_all"
    BEFORE_EACH = "before_each"
    AFTER_EACH = "after_each"


@dataclass(frozen=True)
class TestCase:
    """Registered runnable unit."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    name: str
    qualified_name: str
    body: TestBody
    modifier: Modifier = Modifier.NORMAL


def validate_case(case: TestCase) -> None:
    """Reject cases without a name or with a non-callable body."""
    if not case.name:
        raise RegistrationError("Test case name must not be empty.")
    if not callable(case.body):
        raise RegistrationError(f"Test case body must be callable: {case.qualified_name}")
