"""Result-typed test registration and execution.

Top-level functions register into and run the process-wide default context.
Use `new_context()` for isolated registries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .assertions import (
    OK,
    AssertionResult,
    Err,
    Ok,
    all_of,
    and_then,
    at_least,
    at_most,
    contains,
    equal,
    greater_than,
    is_false,
    is_none,
    is_not_none,
    is_true,
    less_than,
    not_contains,
    not_equal,
)
from .outcomes import Fail, Outcome, Pass, Skip, SkipReason, TestReport
from .registration import (
    HookKind,
    Modifier,
    RegistrationError,
    RunContext,
    TestBody,
    TestCase,
    default_context,
    new_context,
)
from .reporting import print_results
from .run_execution import (
    RunOptions,
    RunResults,
    run_context,
    run_suite,
    run_tests,
    run_tests_fail_fast,
    run_tests_filtered,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def test(name: str, body: TestBody) -> None:
    """Register a test case."""
    default_context().test(name, body)


def skip(name: str, body: TestBody) -> None:
    """Register a test case that is always reported as skipped."""
    default_context().skip(name, body)


def only(name: str, body: TestBody) -> None:
    """Register a focused test case; unfocused cases are then excluded."""
    default_context().only(name, body)


def describe(name: str, builder: Callable[[], object]) -> None:
    """Open a BDD suite; `builder` registers nested suites and cases."""
    default_context().describe(name, builder)


def it(name: str, body: TestBody) -> None:
    default_context().it(name, body)


def xit(name: str, body: TestBody) -> None:
    default_context().xit(name, body)


def fit(name: str, body: TestBody) -> None:
    default_context().fit(name, body)


def before_all(procedure: Callable[[], object]) -> None:
    default_context().before_all(procedure)


def after_all(procedure: Callable[[], object]) -> None:
    default_context().after_all(procedure)


def before_each(procedure: Callable[[], object]) -> None:
    default_context().before_each(procedure)


def after_each(procedure: Callable[[], object]) -> None:
    default_context().after_each(procedure)


test.__test__ = False  # type: ignore[attr-defined]  # not a pytest test

__all__ = [
    "OK",
    "Ok",
    "Err",
    "AssertionResult",
    "all_of",
    "and_then",
    "equal",
    "not_equal",
    "is_true",
    "is_false",
    "is_none",
    "is_not_none",
    "contains",
    "not_contains",
    "greater_than",
    "less_than",
    "at_least",
    "at_most",
    "Pass",
    "Fail",
    "Skip",
    "SkipReason",
    "Outcome",
    "TestReport",
    "HookKind",
    "Modifier",
    "RegistrationError",
    "RunContext",
    "TestBody",
    "TestCase",
    "default_context",
    "new_context",
    "RunOptions",
    "RunResults",
    "run_context",
    "run_suite",
    "run_tests",
    "run_tests_fail_fast",
    "run_tests_filtered",
    "print_results",
    "test",
    "skip",
    "only",
    "describe",
    "it",
    "xit",
    "fit",
    "before_all",
    "after_all",
    "before_each",
    "after_each",
]
