"""Test file discovery by naming convention."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path

from simple_test_engine.configuration.runtime_settings import DEFAULT_PATTERNS

_LOGGER = logging.getLogger(__name__)
_IGNORED_DIRECTORIES = frozenset({"__pycache__", "node_modules", "venv", "site-packages"})


class DiscoveryError(Exception):
    """Raised when test files cannot be enumerated."""


def discover_test_files(
    directory: Path | str,
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    name_filter: str | None = None,
) -> list[Path]:
    """Return matching test files under `directory`, sorted by relative path."""
    root = Path(directory)
    if not root.is_dir():
        raise DiscoveryError(f"Test directory not found: {root}")

    discovered: list[Path] = []
    for candidate in root.rglob("*"):
        relative = candidate.relative_to(root)
        if not candidate.is_file() or _is_ignored(relative):
            continue
        if not any(fnmatch(candidate.name, pattern) for pattern in patterns):
            continue
        if name_filter is not None and name_filter not in relative.as_posix():
            continue
        discovered.append(relative)

    discovered.sort(key=lambda path: path.as_posix())
    _LOGGER.debug("discovered %d test file(s) under %s", len(discovered), root)
    return [root / relative for relative in discovered]


def _is_ignored(relative: Path) -> bool:
    return any(
        part.startswith(".") or part in _IGNORED_DIRECTORIES for part in relative.parts[:-1]
    )
