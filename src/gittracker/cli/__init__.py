"""The gittracker command-line interface."""

from ._app import create_app, main, run_scan
from ._report import exit_code_for, format_dirty_line, render_json, render_text
from ._shared import ExitCode, exit_with_error, format_json

__all__ = [
    "ExitCode",
    "create_app",
    "exit_code_for",
    "exit_with_error",
    "format_dirty_line",
    "format_json",
    "main",
    "render_json",
    "render_text",
    "run_scan",
]
