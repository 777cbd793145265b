"""Scenario-style integration tests for core run behaviors."""

from __future__ import annotations

import io

import pytest
from simple_test_engine import (
    OK,
    Err,
    Fail,
    Pass,
    RegistrationError,
    RunOptions,
    Skip,
    SkipReason,
    all_of,
    and_then,
    contains,
    equal,
    new_context,
    print_results,
    run_context,
)


def test_bdd_suite_with_hooks_runs_end_to_end() -> None:
    context = new_context()
    trace: list[str] = []
    state: dict[str, list[int]] = {}

    context.before_all(lambda: trace.append("before_all"))
    context.before_each(lambda: state.update(items=[]))
    context.after_each(lambda: trace.append("after_each"))
    context.after_all(lambda: trace.append("after_all"))

    def push_then_check():
        state["items"].append(1)
        trace.append("push")
        return and_then(equal(len(state["items"]), 1), lambda: equal(state["items"][0], 1))

    def starts_empty():
        trace.append("empty")
        return equal(state["items"], [])

    def build_stack() -> None:
        context.it("starts empty", starts_empty)
        context.describe("push", lambda: context.it("adds one item", push_then_check))
        context.xit("pops", lambda: Err("not implemented"))

    context.describe("Stack", build_stack)

    results = run_context(context)

    assert [(report.qualified_name, report.outcome) for report in results.reports] == [
        ("Stack > starts empty", Pass()),
        ("Stack > push > adds one item", Pass()),
        ("Stack > pops", Skip(SkipReason.SKIP_MODIFIER)),
    ]
    assert trace == ["before_all", "empty", "after_each", "push", "after_each", "after_all"]
    assert results.success is True


def test_focused_case_with_aggregated_assertions_reports_failure() -> None:
    context = new_context()
    context.test("untouched", lambda: OK)
    context.only(
        "greeting",
        lambda: all_of([contains("hello world", "hello"), equal("world".upper(), "World")]),
    )

    results = run_context(context)
    stream = io.StringIO()
    print_results(results, reporter="pretty", stream=stream)

    assert results.reports[0].outcome == Skip(SkipReason.EXCLUDED_BY_ONLY)
    assert isinstance(results.reports[1].outcome, Fail)
    assert results.summary.success is False
    assert "expected: 'World'" in stream.getvalue()
    assert "actual:   'WORLD'" in stream.getvalue()


def test_fail_fast_run_keeps_selector_skips_and_drops_truncated_cases() -> None:
    context = new_context()
    context.test("first", lambda: Err("broken"))
    context.test("second", lambda: OK)
    context.skip("third", lambda: OK)

    results = run_context(context, RunOptions(fail_fast=True))

    assert [report.qualified_name for report in results.reports] == ["first", "third"]
    assert results.summary.total == 2


def test_registration_inside_a_running_body_fails_that_case() -> None:
    context = new_context()

    def late_registration():
        context.test("late", lambda: OK)

    context.test("registers", late_registration)

    results = run_context(context)

    outcome = results.reports[0].outcome
    assert isinstance(outcome, Fail)
    assert outcome.message.startswith("RegistrationError:")
    with pytest.raises(RegistrationError):
        context.test("after run", lambda: OK)
