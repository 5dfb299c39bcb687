"""Shared CLI helpers."""

from qso.cli.utils.output import (
    console,
    create_build_panel,
    format_event,
    render_body,
    print_error,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_build_panel",
    "format_event",
    "render_body",
    "print_error",
    "print_success",
    "print_warning",
]
