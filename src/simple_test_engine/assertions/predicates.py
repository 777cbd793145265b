"""Comparison predicates returning assertion results."""

from __future__ import annotations

from typing import Any

from .assertion_results import OK, AssertionResult, Err


def equal(actual: object, expected: object) -> AssertionResult:
    if actual == expected:
        return OK
    return Err(
        f"expected {expected!r}, got {actual!r}",
        expected=expected,
        actual=actual,
    )


def not_equal(actual: object, unexpected: object) -> AssertionResult:
    if actual != unexpected:
        return OK
    return Err(f"expected a value different from {unexpected!r}", actual=actual)


def is_true(value: object) -> AssertionResult:
    if value is True:
        return OK
    return Err(f"expected True, got {value!r}", expected=True, actual=value)


def is_false(value: object) -> AssertionResult:
    if value is False:
        return OK
    return Err(f"expected False, got {value!r}", expected=False, actual=value)


def is_none(value: object) -> AssertionResult:
    if value is None:
        return OK
    return Err(f"expected None, got {value!r}", expected=None, actual=value)


def is_not_none(value: object) -> AssertionResult:
    if value is not None:
        return OK
    return Err("expected a value, got None")


def contains(container: Any, item: object) -> AssertionResult:
    """Substring check for strings, membership check for other containers."""
    if item in container:
        return OK
    return Err(f"expected {container!r} to contain {item!r}", expected=item, actual=container)


def not_contains(container: Any, item: object) -> AssertionResult:
    if item not in container:
        return OK
    return Err(f"expected {container!r} not to contain {item!r}", actual=container)


def greater_than(actual: Any, bound: Any) -> AssertionResult:
    if actual > bound:
        return OK
    return Err(f"expected {actual!r} > {bound!r}", expected=f"> {bound!r}", actual=actual)


def less_than(actual: Any, bound: Any) -> AssertionResult:
    if actual < bound:
        return OK
    return Err(f"expected {actual!r} < {bound!r}", expected=f"< {bound!r}", actual=actual)


def at_least(actual: Any, bound: Any) -> AssertionResult:
    if actual >= bound:
        return OK
    return Err(f"expected {actual!r} >= {bound!r}", expected=f">= {bound!r}", actual=actual)


def at_most(actual: Any, bound: Any) -> AssertionResult:
    if actual <= bound:
        return OK
    return Err(f"expected {actual!r} <= {bound!r}", expected=f"<= {bound!r}", actual=actual)
