"""BDD suite projection tests."""

from __future__ import annotations

import pytest
from simple_test_engine.registration import Modifier, RegistrationError, RunContext
from simple_test_engine.run_execution import run_context


def _noop() -> None:
    return None


def test_nested_describe_flattens_depth_first_with_qualified_names(context: RunContext) -> None:
    def build_c() -> None:
        context.it("d", _noop)

    def build_a() -> None:
        context.it("b", _noop)
        context.describe("C", build_c)

    context.describe("A", build_a)

    assert [case.qualified_name for case in context.cases] == ["A > b", "A > C > d"]
    assert [case.name for case in context.cases] == ["b", "d"]


def test_child_order_is_preserved_across_nested_suites(context: RunContext) -> None:
    def build_inner() -> None:
        context.it("inner-1", _noop)
        context.it("inner-2", _noop)

    def build_outer() -> None:
        context.it("before", _noop)
        context.describe("Inner", build_inner)
        context.it("after", _noop)

    context.describe("Outer", build_outer)

    assert [case.qualified_name for case in context.cases] == [
        "Outer > before",
        "Outer > Inner > inner-1",
        "Outer > Inner > inner-2",
        "Outer > after",
    ]


def test_xit_and_fit_set_modifiers(context: RunContext) -> None:
    def build() -> None:
        context.xit("skipped", _noop)
        context.fit("focused", _noop)
        context.it("plain", _noop)

    context.describe("Suite", build)

    assert [case.modifier for case in context.cases] == [
        Modifier.SKIP,
        Modifier.ONLY,
        Modifier.NORMAL,
    ]


def test_suites_are_registered_when_the_outermost_describe_closes(context: RunContext) -> None:
    seen_during_build: list[int] = []

    def build() -> None:
        context.it("inside", _noop)
        seen_during_build.append(len(context.cases))

    context.test("flat-before", _noop)
    context.describe("Suite", build)
    context.test("flat-after", _noop)

    assert seen_during_build == [1]
    assert [case.qualified_name for case in context.cases] == [
        "flat-before",
        "Suite > inside",
        "flat-after",
    ]


def test_top_level_it_uses_its_own_name(context: RunContext) -> None:
    context.it("standalone", _noop)

    assert [case.qualified_name for case in context.cases] == ["standalone"]


def test_failing_builder_discards_partial_tree_and_propagates(context: RunContext) -> None:
    def build_inner() -> None:
        context.it("lost", _noop)
        raise RuntimeError("builder broke")

    def build() -> None:
        context.it("also-lost", _noop)
        context.describe("Inner", build_inner)

    with pytest.raises(RuntimeError, match="builder broke"):
        context.describe("Outer", build)

    assert context.cases == ()
    context.describe("Next", lambda: context.it("kept", _noop))
    assert [case.qualified_name for case in context.cases] == ["Next > kept"]


def test_running_inside_an_open_describe_is_refused(context: RunContext) -> None:
    def build() -> None:
        context.it("a", _noop)
        run_context(context)

    with pytest.raises(RegistrationError, match="describe block is still open"):
        context.describe("Suite", build)

    assert context.sealed is False
    assert context.cases == ()


def test_outer_builder_can_recover_from_a_failing_nested_describe(context: RunContext) -> None:
    def build_broken() -> None:
        context.it("lost", _noop)
        raise ValueError("nested builder broke")

    def build_outer() -> None:
        context.it("before", _noop)
        try:
            context.describe("Broken", build_broken)
        except ValueError:
            pass
        context.it("after", _noop)

    context.describe("Outer", build_outer)

    assert [case.qualified_name for case in context.cases] == [
        "Outer > before",
        "Outer > after",
    ]
    context.describe("Next", lambda: context.it("kept", _noop))
    assert context.cases[-1].qualified_name == "Next > kept"


def test_malformed_nested_case_is_rejected_at_the_it_call(context: RunContext) -> None:
    registered_before_error: list[int] = []

    def build() -> None:
        context.it("ok", _noop)
        registered_before_error.append(len(context.cases))
        context.it("", _noop)
        context.it("later", _noop)

    with pytest.raises(RegistrationError, match="name must not be empty"):
        context.describe("A", build)

    assert registered_before_error == [0]
    assert context.cases == ()
    context.describe("B", lambda: context.it("fresh", _noop))
    assert [case.qualified_name for case in context.cases] == ["B > fresh"]


def test_non_callable_nested_body_is_rejected(context: RunContext) -> None:
    def build() -> None:
        context.it("broken", "not callable")  # type: ignore[arg-type]

    with pytest.raises(RegistrationError, match="must be callable"):
        context.describe("A", build)

    assert context.cases == ()
