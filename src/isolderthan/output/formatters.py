"""Rich/JSON output helpers.

Adapts a ServiceResult to the requested output mode: a few plain lines
for humans and scripts, or the full result as JSON with ``--json``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape

from isolderthan.output.console import render_lines

if TYPE_CHECKING:
    from isolderthan.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags relevant to rendering."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_verdict(result: ServiceResult, settings: OutputSettings) -> str:
    data = result.data
    meta = result.meta or {}
    path = escape(data["path"])

    if data["older"]:
        lines = [
            f"[iot.older]File '{path}' is older than specified period[/]",
            f"[iot.key]File modified:[/] [iot.time]{data['file_modified']}[/]",
            f"[iot.key]Reference time:[/] [iot.time]{data['reference_time']}[/]",
        ]
    else:
        lines = [f"[iot.not_older]File '{path}' is NOT older than specified period[/]"]

    if settings.verbose and meta:
        lines += [
            f"[iot.key]Threshold:[/] {escape(meta['threshold_text'])}",
            f"[iot.key]Reference mode:[/] {meta['reference_mode']}",
            f"[iot.key]Anchor:[/] [iot.time]{meta['anchor']}[/]",
        ]

    return render_lines(lines)


def format_warnings(result: ServiceResult) -> str:
    """``WARNING:`` lines for the result's warnings; empty when there are none."""
    return render_lines(
        [f"[iot.warning]WARNING:[/] {escape(warning)}" for warning in result.warnings]
    )


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Returns an empty string for a successful result in quiet mode.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if settings.quiet:
            return ""
        return _format_verdict(result, settings)
    error_msg = result.error.message if result.error else "Unknown error"
    return f"Error: {error_msg}"
