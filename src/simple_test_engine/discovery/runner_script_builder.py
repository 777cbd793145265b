"""Runner script rendering for discovered test files."""

from __future__ import annotations

import shlex
import stat
from collections.abc import Sequence
from pathlib import Path

from simple_test_engine.configuration.runtime_settings import SCRIPT_FORMATS

_RUN_MODULE = "simple_test_engine"


def render_runner_script(
    paths: Sequence[Path | str], script_format: str, interpreter: str = "python"
) -> str:
    """Render discovered paths as a list, a POSIX shell script or a PowerShell script."""
    if script_format not in SCRIPT_FORMATS:
        raise ValueError(
            f"Unsupported script format '{script_format}'. "
            f"Expected one of: {', '.join(SCRIPT_FORMATS)}."
        )
    entries = [Path(path).as_posix() for path in paths]
    if script_format == "list":
        lines = entries
    elif script_format == "sh":
        lines = ["#!/bin/sh", "set -e"]
        lines.extend(
            shlex.join((interpreter, "-m", _RUN_MODULE, "run", entry)) for entry in entries
        )
    else:
        lines = ["$ErrorActionPreference = 'Stop'"]
        for entry in entries:
            lines.append(
                f"& {_ps_quote(interpreter)} -m {_RUN_MODULE} run {_ps_quote(entry)}"
            )
            lines.append("if ($LASTEXITCODE -ne 0) { exit $LASTEXITCODE }")
    return "\n".join(lines) + "\n" if lines else ""


def write_runner_script(content: str, output_path: Path | str, script_format: str) -> Path:
    """Write a rendered script; shell scripts are made executable."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
    if script_format == "sh":
        mode = destination.stat().st_mode
        destination.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return destination.resolve()


def _ps_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"
