"""Outcome domain exports."""

from .test_outcomes import Fail, Outcome, Pass, Skip, SkipReason, TestReport

__all__ = [
    "Pass",
    "Fail",
    "Skip",
    "SkipReason",
    "Outcome",
    "TestReport",
]
