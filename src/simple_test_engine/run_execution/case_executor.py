"""Ordered execution of runnable test cases with lifecycle hooks."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from simple_test_engine.assertions.assertion_results import Err
from simple_test_engine.outcomes.test_outcomes import Fail, Outcome, Pass, TestReport
from simple_test_engine.registration.case_models import HookKind, HookProcedure, TestCase
from simple_test_engine.selection.selection_policy import IndexedCase

_LOGGER = logging.getLogger(__name__)


class ExecutorState(str, Enum):
    """Lifecycle of one executor."""

    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class CaseExecutor:
    """Runs selected cases in order, interleaving hooks.

    Hook exceptions are not caught: they abort the run. AfterAll hooks still
    run when BeforeAll completed, then the exception propagates.
    """

    def __init__(
        self,
        hooks: Mapping[HookKind, Sequence[HookProcedure]],
        *,
        fail_fast: bool = False,
    ) -> None:
        self._hooks = {kind: tuple(hooks.get(kind, ())) for kind in HookKind}
        self._fail_fast = fail_fast
        self._state = ExecutorState.IDLE

    @property
    def state(self) -> ExecutorState:
        return self._state

    def run(self, runnable: Sequence[IndexedCase]) -> tuple[TestReport, ...]:
        if self._state is not ExecutorState.IDLE:
            raise RuntimeError(f"Executor cannot run from state {self._state.value}.")
        reports: list[TestReport] = []
        if not runnable:
            self._state = ExecutorState.DONE
            return ()

        _LOGGER.debug("starting run of %d test case(s)", len(runnable))
        self._invoke_hooks(HookKind.BEFORE_ALL)
        self._state = ExecutorState.RUNNING
        try:
            for entry in runnable:
                report = self._run_case(entry)
                reports.append(report)
                if self._fail_fast and isinstance(report.outcome, Fail):
                    _LOGGER.debug(
                        "fail-fast stop after %s; %d case(s) not run",
                        entry.case.qualified_name,
                        len(runnable) - len(reports),
                    )
                    break
        finally:
            self._invoke_hooks(HookKind.AFTER_ALL)
            self._state = ExecutorState.DONE
        _LOGGER.debug("run finished with %d outcome(s)", len(reports))
        return tuple(reports)

    def _run_case(self, entry: IndexedCase) -> TestReport:
        case = entry.case
        _LOGGER.debug("running %s", case.qualified_name)
        self._invoke_hooks(HookKind.BEFORE_EACH)
        outcome = _evaluate_body(case)
        self._invoke_hooks(HookKind.AFTER_EACH)
        _LOGGER.debug("%s -> %s", case.qualified_name, type(outcome).__name__)
        return TestReport(
            index=entry.index,
            name=case.name,
            qualified_name=case.qualified_name,
            outcome=outcome,
        )

    def _invoke_hooks(self, kind: HookKind) -> None:
        for procedure in self._hooks[kind]:
            procedure()


def _evaluate_body(case: TestCase) -> Outcome:
    try:
        produced = case.body()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return Fail(message=f"{type(exc).__name__}: {exc}")
    return to_outcome(produced)


def to_outcome(produced: object) -> Outcome:
    """Read a body's final value as a pass/fail outcome.

    Values that are neither assertion results nor outcomes count as a pass:
    only an observed failure fails a test.
    """
    if isinstance(produced, Err):
        return Fail(message=produced.message, expected=produced.expected, actual=produced.actual)
    if isinstance(produced, (Pass, Fail)):
        return produced
    return Pass()
