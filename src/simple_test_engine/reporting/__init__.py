"""Reporting domain exports."""

from .reporters import (
    REPORTER_NAMES,
    CompactReporter,
    DotReporter,
    PrettyReporter,
    Reporter,
    create_reporter,
    print_results,
    report_results,
)

__all__ = [
    "REPORTER_NAMES",
    "Reporter",
    "PrettyReporter",
    "DotReporter",
    "CompactReporter",
    "create_reporter",
    "print_results",
    "report_results",
]
