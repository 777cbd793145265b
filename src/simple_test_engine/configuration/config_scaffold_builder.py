"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "simple-test.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for simple-test-engine.
# Every key is optional; remove the ones you do not need.
# Command line flags override the values below.

run:
  # Reporter used by `simple-test run` (pretty, dot or compact).
  reporter: pretty
  # Stop running test bodies after the first failing test case.
  fail_fast: false
  # Only run test cases whose qualified name contains this text (case-sensitive).
  # filter: "<OPTIONAL>"

discovery:
  # Directory searched for test files, relative to this file.
  directory: "."
  # Glob patterns identifying test files.
  patterns:
    - "test_*.py"
    - "*_test.py"
  # Output of `simple-test discover` (list, sh or ps1).
  script_format: sh
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
