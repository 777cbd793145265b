"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from simple_test_engine.reporting.reporters import REPORTER_NAMES

from .runtime_settings import (
    DEFAULT_PATTERNS,
    SCRIPT_FORMATS,
    Configuration,
    DiscoverySettings,
    RunSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file; `None` yields the defaults."""
    if config_path is None:
        return Configuration(path=None)

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        run=_parse_run_section(parsed.get("run")),
        discovery=_parse_discovery_section(parsed.get("discovery"), path.parent),
    )


def _parse_run_section(value: Any) -> RunSettings:
    section = _optional_mapping(value, "run")
    reporter = _require_choice(section.get("reporter", "pretty"), "run.reporter", REPORTER_NAMES)
    fail_fast = _require_bool(section.get("fail_fast", False), "run.fail_fast")
    name_filter = _optional_string(section.get("filter"), "run.filter")
    return RunSettings(reporter=reporter, fail_fast=fail_fast, name_filter=name_filter)


def _parse_discovery_section(value: Any, base_path: Path) -> DiscoverySettings:
    section = _optional_mapping(value, "discovery")
    directory = _require_non_empty_string(section.get("directory", "."), "discovery.directory")
    patterns = _normalize_patterns(section.get("patterns"))
    script_format = _require_choice(
        section.get("script_format", "sh"), "discovery.script_format", SCRIPT_FORMATS
    )
    return DiscoverySettings(
        directory=_resolve_path(base_path, directory),
        patterns=patterns,
        script_format=script_format,
    )


def _normalize_patterns(value: Any) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_PATTERNS
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("discovery.patterns must be a string or list of strings.")
    patterns: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("discovery.patterns entries must be strings.")
        stripped = item.strip()
        if stripped:
            patterns.append(stripped)
    if not patterns:
        raise ConfigurationError("discovery.patterns must contain at least one pattern.")
    return tuple(patterns)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value or None


def _require_choice(value: Any, field_name: str, choices: Sequence[str]) -> str:
    normalized = _require_non_empty_string(value, field_name).lower()
    if normalized not in choices:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(choices)}.")
    return normalized


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
