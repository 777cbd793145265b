"""Run execution domain exports."""

from .case_executor import CaseExecutor, ExecutorState, to_outcome
from .run_contracts import RunOptions, RunResults
from .run_use_case import (
    run_context,
    run_suite,
    run_tests,
    run_tests_fail_fast,
    run_tests_filtered,
)

__all__ = [
    "CaseExecutor",
    "ExecutorState",
    "to_outcome",
    "RunOptions",
    "RunResults",
    "run_context",
    "run_suite",
    "run_tests",
    "run_tests_fail_fast",
    "run_tests_filtered",
]
