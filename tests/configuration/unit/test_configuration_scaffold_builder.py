"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from simple_test_engine.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from simple_test_engine.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Run configuration template" in scaffold
    assert "run:" in scaffold
    assert "reporter:" in scaffold
    assert "fail_fast:" in scaffold
    assert "discovery:" in scaffold
    assert "patterns:" in scaffold
    assert "script_format:" in scaffold


def test_written_scaffold_loads_as_valid_configuration(tmp_path: Path) -> None:
    output_path = tmp_path / "simple-test.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.run.reporter == "pretty"
    assert configuration.discovery.patterns == ("test_*.py", "*_test.py")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "simple-test.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
