"""Command line interface entry point."""

from __future__ import annotations

import logging
import runpy
import sys
from pathlib import Path

import click

from simple_test_engine.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from simple_test_engine.configuration.runtime_settings import SCRIPT_FORMATS
from simple_test_engine.discovery import (
    DiscoveryError,
    discover_test_files,
    render_runner_script,
    write_runner_script,
)
from simple_test_engine.registration import default_context
from simple_test_engine.reporting import REPORTER_NAMES, print_results
from simple_test_engine.run_execution import RunOptions, run_context

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_TEST_FILE_RUN_NAME = "__simple_test__"


class CliError(Exception):
    """Custom CLI error."""


class RunFailedError(CliError):
    """Raised when a run finished with failing test cases."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-test-engine")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for diagnostics written to stderr",
)
def cli(log_level: str) -> None:
    """Result-typed test runner utility."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML run configuration file",
)
@click.option("--filter", "name_filter", default=None, help="Run only matching test names")
@click.option(
    "--fail-fast",
    is_flag=True,
    default=False,
    help="Stop running test bodies after the first failure",
)
@click.option(
    "--reporter",
    type=click.Choice(REPORTER_NAMES),
    default=None,
    help="Output format for results",
)
def run_files(
    files: tuple[str, ...],
    config_path: str | None,
    name_filter: str | None,
    fail_fast: bool,
    reporter: str | None,
) -> None:
    """Register the tests defined in FILES and run them."""
    try:
        settings = load_configuration(config_path).run
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    context = default_context()
    context.reset()
    for file_path in files:
        _load_test_file(Path(file_path))

    options = RunOptions(
        name_filter=name_filter if name_filter is not None else settings.name_filter,
        fail_fast=fail_fast or settings.fail_fast,
    )
    results = run_context(context, options)
    print_results(results, reporter=reporter or settings.reporter)
    if not results.success:
        raise RunFailedError(f"{results.summary.failed} test case(s) failed.")


@cli.command(name="discover")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML run configuration file",
)
@click.option(
    "--dir",
    "directory",
    required=False,
    type=click.Path(path_type=str),
    help="Directory to search for test files",
)
@click.option("--filter", "name_filter", default=None, help="Keep only matching file paths")
@click.option(
    "--format",
    "script_format",
    type=click.Choice(SCRIPT_FORMATS),
    default=None,
    help="Output as a path list, a POSIX shell script or a PowerShell script",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the script to this path instead of stdout",
)
def discover(
    config_path: str | None,
    directory: str | None,
    name_filter: str | None,
    script_format: str | None,
    output_path: str | None,
) -> None:
    """Find test files and emit a script that runs each of them."""
    try:
        settings = load_configuration(config_path).discovery
        resolved_format = script_format or settings.script_format
        paths = discover_test_files(
            directory or settings.directory,
            settings.patterns,
            name_filter,
        )
        content = render_runner_script(paths, resolved_format)
        if output_path is None:
            click.echo(content, nl=False)
            return
        written = write_runner_script(content, output_path, resolved_format)
    except (ConfigurationError, DiscoveryError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _load_test_file(path: Path) -> None:
    if not path.is_file():
        raise CliError(f"Test file not found: {path}")
    try:
        runpy.run_path(str(path), run_name=_TEST_FILE_RUN_NAME)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise CliError(f"Failed to load {path}: {type(exc).__name__}: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
