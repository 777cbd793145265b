"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PATTERNS = ("test_*.py", "*_test.py")
SCRIPT_FORMATS = ("list", "sh", "ps1")


@dataclass(frozen=True)
class RunSettings:
    """Defaults for the run command."""

    reporter: str = "pretty"
    fail_fast: bool = False
    name_filter: str | None = None


@dataclass(frozen=True)
class DiscoverySettings:
    """Test file discovery and runner-script settings."""

    directory: Path = Path(".")
    patterns: tuple[str, ...] = DEFAULT_PATTERNS
    script_format: str = "sh"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    run: RunSettings = field(default_factory=RunSettings)
    discovery: DiscoverySettings = field(default_factory=DiscoverySettings)
