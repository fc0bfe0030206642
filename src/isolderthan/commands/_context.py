"""AppContext: shared Click context and the exit-code boundary.

Created once by the CLI entry point. Provides centralized result emission:
stdout/stderr routing and the mapping from ServiceResult to exit codes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

import click

from isolderthan.domain.types import ErrorCode
from isolderthan.output.formatters import OutputSettings, format_result, format_warnings

if TYPE_CHECKING:
    from isolderthan.config.settings import IsOlderThanSettings
    from isolderthan.services.result import ServiceResult


class ExitCode(IntEnum):
    """Process exit statuses.

    ``NOT_OLDER`` shares its value with ``INVALID_ARGS`` for compatibility
    with existing scripts; it is an alias, so both names resolve to 1.
    """

    OLDER = 0
    INVALID_ARGS = 1
    NOT_OLDER = 1
    FILE_NOT_FOUND = 2
    FILE_ACCESS = 3
    INVALID_COMBINATION = 4
    INVALID_VALUE = 5


ERROR_EXIT_CODES: dict[str, ExitCode] = {
    ErrorCode.INVALID_ARGUMENTS: ExitCode.INVALID_ARGS,
    ErrorCode.FILE_NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    ErrorCode.FILE_ACCESS: ExitCode.FILE_ACCESS,
    ErrorCode.INVALID_COMBINATION: ExitCode.INVALID_COMBINATION,
    ErrorCode.INVALID_VALUE: ExitCode.INVALID_VALUE,
}


def exit_code_for(result: ServiceResult) -> ExitCode:
    """Map a ServiceResult to the process exit code."""
    if result.ok:
        return ExitCode.OLDER if result.data.get("older") else ExitCode.NOT_OLDER
    code = result.error.code if result.error else ErrorCode.INVALID_ARGUMENTS
    return ERROR_EXIT_CODES.get(code, ExitCode.INVALID_ARGS)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: IsOlderThanSettings) -> None:
        self.settings = settings

        from isolderthan.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult, then exit with its code.

        * Success (``result.ok``): verdict to stdout. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: one diagnostic line to stderr.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if result.warnings and not (settings.json_output or settings.quiet):
                click.echo(format_warnings(result), err=True)
        else:
            click.echo(output, err=True)
        raise SystemExit(int(exit_code_for(result)))
