"""Assertion result exports."""

from .assertion_results import OK, AssertionResult, Err, Ok, all_of, and_then
from .predicates import (
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
]
