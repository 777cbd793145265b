"""BDD suite construction and flattening."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .case_models import Modifier, TestBody, TestCase, validate_case

QUALIFIED_NAME_SEPARATOR = " > "


@dataclass
class _SuiteNode:
    """Arena entry for one `describe` block."""

    name: str
    children: list[int | TestCase] = field(default_factory=list)


class SuiteProjector:
    """Builds nested suites and flattens each finished top-level suite.

    Suites are kept in an arena addressed by index while the outermost
    `describe` is open. Child entries are either arena indices (nested suites)
    or test cases whose `qualified_name` is filled in during flattening.
    """

    def __init__(self, emit: Callable[[TestCase], None]) -> None:
        self._emit = emit
        self._arena: list[_SuiteNode] = []
        self._stack: list[int] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def describe(self, name: str, builder: Callable[[], object]) -> None:
        index = len(self._arena)
        self._arena.append(_SuiteNode(name=name))
        if self._stack:
            self._arena[self._stack[-1]].children.append(index)
        self._stack.append(index)
        try:
            builder()
        except BaseException:
            self._abandon(index)
            raise
        self._stack.pop()
        if self._stack:
            return
        try:
            flattened = self._flatten(index, ())
        finally:
            self._arena.clear()
        for case in flattened:
            self._emit(case)

    def add_case(self, name: str, body: TestBody, modifier: Modifier) -> None:
        case = TestCase(name=name, qualified_name=name, body=body, modifier=modifier)
        if not self._stack:
            self._emit(case)
            return
        validate_case(case)
        self._arena[self._stack[-1]].children.append(case)

    def discard(self) -> None:
        """Drop any partially built tree."""
        self._stack.clear()
        self._arena.clear()

    def _abandon(self, index: int) -> None:
        """Unwind one failed frame; enclosing suites keep building."""
        self._stack.pop()
        if not self._stack:
            self._arena.clear()
            return
        self._arena[self._stack[-1]].children.remove(index)

    def _flatten(self, index: int, ancestors: tuple[str, ...]) -> list[TestCase]:
        node = self._arena[index]
        path = (*ancestors, node.name)
        flattened: list[TestCase] = []
        for child in node.children:
            if isinstance(child, int):
                flattened.extend(self._flatten(child, path))
                continue
            flattened.append(
                TestCase(
                    name=child.name,
                    qualified_name=QUALIFIED_NAME_SEPARATOR.join((*path, child.name)),
                    body=child.body,
                    modifier=child.modifier,
                )
            )
        return flattened
