"""Result values produced by assertions and their combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Ok:
    """Successful assertion result."""

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed assertion result with an optional expected/actual breakdown."""

    message: str
    expected: object | None = None
    actual: object | None = None

    @property
    def is_ok(self) -> bool:
        return False


AssertionResult = Ok | Err

OK = Ok()


def all_of(results: Iterable[AssertionResult]) -> AssertionResult:
    """Return the first failed result, or OK when every result succeeded.

    Lazy iterables are consumed only up to the first failure.
    """
    for result in results:
        if isinstance(result, Err):
            return result
    return OK


def and_then(
    result: AssertionResult, next_step: Callable[[], AssertionResult]
) -> AssertionResult:
    """Chain a follow-up assertion that only runs when `result` succeeded."""
    if isinstance(result, Err):
        return result
    return next_step()
