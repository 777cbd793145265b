"""Discovery domain exports."""

from .runner_script_builder import render_runner_script, write_runner_script
from .file_discovery import DiscoveryError, discover_test_files

__all__ = [
    "DiscoveryError",
    "discover_test_files",
    "render_runner_script",
    "write_runner_script",
]
