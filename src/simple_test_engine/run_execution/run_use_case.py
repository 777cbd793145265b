"""Run use-case: select, execute, merge and summarize."""

from __future__ import annotations

import logging

from simple_test_engine.aggregation.run_summary import summarize
from simple_test_engine.registration.case_models import HookKind
from simple_test_engine.registration.run_context import RunContext, default_context
from simple_test_engine.selection.selection_policy import select_cases

from .case_executor import CaseExecutor
from .run_contracts import RunOptions, RunResults

_LOGGER = logging.getLogger(__name__)


def run_context(context: RunContext, options: RunOptions | None = None) -> RunResults:
    """Run every case registered in `context` and return ordered results."""
    resolved = options or RunOptions()
    context.seal()
    selection = select_cases(context.cases, resolved.name_filter)
    _LOGGER.debug(
        "selected %d of %d case(s) (filter=%r, fail_fast=%s)",
        len(selection.runnable),
        len(context.cases),
        resolved.name_filter,
        resolved.fail_fast,
    )
    executor = CaseExecutor(
        {kind: context.hooks(kind) for kind in HookKind},
        fail_fast=resolved.fail_fast,
    )
    executed = executor.run(selection.runnable)
    reports = tuple(sorted((*selection.skipped, *executed), key=lambda report: report.index))
    return RunResults(
        reports=reports,
        summary=summarize(report.outcome for report in reports),
    )


def run_tests(context: RunContext | None = None) -> RunResults:
    """Run all registered tests."""
    return run_context(context or default_context())


def run_tests_filtered(name_filter: str, context: RunContext | None = None) -> RunResults:
    """Run registered tests whose qualified name contains `name_filter`."""
    return run_context(context or default_context(), RunOptions(name_filter=name_filter))


def run_tests_fail_fast(context: RunContext | None = None) -> RunResults:
    """Run registered tests, stopping after the first failure."""
    return run_context(context or default_context(), RunOptions(fail_fast=True))


def run_suite(
    context: RunContext | None = None, options: RunOptions | None = None
) -> RunResults:
    """Run the BDD-flattened registry.

    Finished `describe` trees are flattened into the registry as they close,
    so this runs the same ordered case list as `run_tests`.
    """
    return run_context(context or default_context(), options)
