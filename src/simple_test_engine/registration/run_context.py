"""Run context: the ordered registry of test cases and lifecycle hooks."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .case_models import (
    HookKind,
    HookProcedure,
    Modifier,
    RegistrationError,
    TestBody,
    TestCase,
    validate_case,
)
from .suite_projection import SuiteProjector

_LOGGER = logging.getLogger(__name__)


class RunContext:
    """Ordered store of test cases and hooks for one run.

    All registration has to happen before the first run of the context; after
    that the context is sealed until `reset()` is called.
    """

    def __init__(self) -> None:
        self._cases: list[TestCase] = []
        self._hooks: dict[HookKind, list[HookProcedure]] = {kind: [] for kind in HookKind}
        self._projector = SuiteProjector(self.register)
        self._sealed = False

    @property
    def cases(self) -> tuple[TestCase, ...]:
        return tuple(self._cases)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def hooks(self, kind: HookKind) -> tuple[HookProcedure, ...]:
        return tuple(self._hooks[kind])

    def register(self, case: TestCase) -> None:
        """Append a test case in call order."""
        self._ensure_open(case.qualified_name)
        validate_case(case)
        self._cases.append(case)

    def register_hook(self, kind: HookKind, procedure: HookProcedure) -> None:
        """Append a hook to the ordered list for its kind."""
        self._ensure_open(kind.value)
        if not callable(procedure):
            raise RegistrationError(f"{kind.value} hook must be callable.")
        self._hooks[kind].append(procedure)

    def seal(self) -> None:
        """Mark the start of a run; further registration is refused."""
        if self._projector.depth:
            raise RegistrationError("Cannot run tests while a describe block is still open.")
        self._sealed = True

    def reset(self) -> None:
        """Forget every registration and reopen the context."""
        self._cases.clear()
        for procedures in self._hooks.values():
            procedures.clear()
        self._projector.discard()
        self._sealed = False
        _LOGGER.debug("run context reset")

    def test(self, name: str, body: TestBody) -> None:
        self._register_flat(name, body, Modifier.NORMAL)

    def skip(self, name: str, body: TestBody) -> None:
        self._register_flat(name, body, Modifier.SKIP)

    def only(self, name: str, body: TestBody) -> None:
        self._register_flat(name, body, Modifier.ONLY)

    def describe(self, name: str, builder: Callable[[], object]) -> None:
        self._ensure_open(name)
        self._projector.describe(name, builder)

    def it(self, name: str, body: TestBody) -> None:
        self._ensure_open(name)
        self._projector.add_case(name, body, Modifier.NORMAL)

    def xit(self, name: str, body: TestBody) -> None:
        self._ensure_open(name)
        self._projector.add_case(name, body, Modifier.SKIP)

    def fit(self, name: str, body: TestBody) -> None:
        self._ensure_open(name)
        self._projector.add_case(name, body, Modifier.ONLY)

    def before_all(self, procedure: HookProcedure) -> None:
        self.register_hook(HookKind.BEFORE_ALL, procedure)

    def after_all(self, procedure: HookProcedure) -> None:
        self.register_hook(HookKind.AFTER_ALL, procedure)

    def before_each(self, procedure: HookProcedure) -> None:
        self.register_hook(HookKind.BEFORE_EACH, procedure)

    def after_each(self, procedure: HookProcedure) -> None:
        self.register_hook(HookKind.AFTER_EACH, procedure)

    def _register_flat(self, name: str, body: TestBody, modifier: Modifier) -> None:
        self.register(TestCase(name=name, qualified_name=name, body=body, modifier=modifier))

    def _ensure_open(self, label: str) -> None:
        if self._sealed:
            raise RegistrationError(
                f"Cannot register '{label}': all registration must precede the first run."
            )


_DEFAULT_CONTEXT = RunContext()


def default_context() -> RunContext:
    """Return the process-wide context used by the top-level functions."""
    return _DEFAULT_CONTEXT


def new_context() -> RunContext:
    """Create an isolated context."""
    return RunContext()
