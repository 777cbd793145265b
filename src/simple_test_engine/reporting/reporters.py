"""Reporters rendering run outcomes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TextIO

import click

from simple_test_engine.aggregation.run_summary import RunSummary
from simple_test_engine.outcomes.test_outcomes import Fail, Outcome, Pass, Skip
from simple_test_engine.run_execution.run_contracts import RunResults

REPORTER_NAMES = ("pretty", "dot", "compact")

_TAG_COLORS = {"PASS": "green", "FAIL": "red", "SKIP": "yellow"}


class Reporter(Protocol):
    """Consumer of the ordered outcome stream."""

    def on_result(self, qualified_name: str, outcome: Outcome) -> None:
        """Render one reported outcome."""
        ...

    def on_summary(self, summary: RunSummary) -> None:
        """Render the final summary block."""
        ...


class _StreamReporter:
    """Shared output and summary rendering."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _echo(self, message: str = "", *, nl: bool = True) -> None:
        click.echo(message, file=self._stream, nl=nl)

    def on_summary(self, summary: RunSummary) -> None:
        self._echo(
            f"passed: {summary.passed}  failed: {summary.failed}  "
            f"skipped: {summary.skipped}  total: {summary.total}"
        )
        verdict = "PASS" if summary.success else "FAIL"
        self._echo(f"RESULT: {_styled_tag(verdict)}")


class PrettyReporter(_StreamReporter):
    """One block per outcome with failure details."""

    def on_result(self, qualified_name: str, outcome: Outcome) -> None:
        tag = _outcome_tag(outcome)
        self._echo(f"{_styled_tag(tag)} {qualified_name}")
        if isinstance(outcome, Fail):
            if outcome.expected is not None or outcome.actual is not None:
                self._echo(f"    expected: {outcome.expected!r}")
                self._echo(f"    actual:   {outcome.actual!r}")
            self._echo(f"    message:  {outcome.message}")
        elif isinstance(outcome, Skip):
            self._echo(f"    reason:   {outcome.reason.value}")

    def on_summary(self, summary: RunSummary) -> None:
        self._echo()
        super().on_summary(summary)


class DotReporter(_StreamReporter):
    """One character per outcome."""

    _SYMBOLS = {"PASS": ".", "FAIL": "F", "SKIP": "s"}

    def on_result(self, qualified_name: str, outcome: Outcome) -> None:
        tag = _outcome_tag(outcome)
        self._echo(click.style(self._SYMBOLS[tag], fg=_TAG_COLORS[tag]), nl=False)

    def on_summary(self, summary: RunSummary) -> None:
        self._echo()
        super().on_summary(summary)


class CompactReporter(_StreamReporter):
    """One line per outcome."""

    def on_result(self, qualified_name: str, outcome: Outcome) -> None:
        tag = _styled_tag(_outcome_tag(outcome))
        if isinstance(outcome, Fail):
            self._echo(f"{tag} {qualified_name}: {outcome.message}")
        elif isinstance(outcome, Skip):
            self._echo(f"{tag} {qualified_name} ({outcome.reason.value})")
        else:
            self._echo(f"{tag} {qualified_name}")


def create_reporter(name: str, stream: TextIO | None = None) -> Reporter:
    """Build a reporter by name."""
    reporters: dict[str, Callable[[TextIO | None], Reporter]] = {
        "pretty": PrettyReporter,
        "dot": DotReporter,
        "compact": CompactReporter,
    }
    try:
        reporter_cls = reporters[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown reporter '{name}'. Expected one of: {', '.join(REPORTER_NAMES)}."
        ) from exc
    return reporter_cls(stream)


def report_results(results: RunResults, reporter: Reporter) -> None:
    """Replay every report and the summary into `reporter`."""
    for report in results.reports:
        reporter.on_result(report.qualified_name, report.outcome)
    reporter.on_summary(results.summary)


def print_results(
    results: RunResults, reporter: str = "pretty", stream: TextIO | None = None
) -> None:
    """Render results with the named reporter to `stream` (stdout by default)."""
    report_results(results, create_reporter(reporter, stream))


def _outcome_tag(outcome: Outcome) -> str:
    if isinstance(outcome, Pass):
        return "PASS"
    if isinstance(outcome, Fail):
        return "FAIL"
    return "SKIP"


def _styled_tag(tag: str) -> str:
    return click.style(tag, fg=_TAG_COLORS[tag], bold=True)
