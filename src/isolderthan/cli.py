"""CLI entry point: ``isolderthan <filepath> [options]``."""

from __future__ import annotations

import click

from isolderthan import __version__
from isolderthan.commands._base import IsOlderThanCommand
from isolderthan.commands._context import AppContext
from isolderthan.config.settings import IsOlderThanSettings

EPILOG = """\b
Parameter rules:
  - -days excludes all other time parameters
  - -weeks excludes all other time parameters
  - -months can be combined with -years (max 11)
  - Default mode: end of previous day reference
  - -exact mode: current program execution time reference

\b
Exit codes:
  0: File is older than specified period
  1: Invalid arguments or file is not older
  2: File not found
  3: File access error
  4: Invalid parameter combination
  5: Invalid parameter value"""


@click.command(
    cls=IsOlderThanCommand,
    epilog=EPILOG,
    examples="""\
  isolderthan app.log
  isolderthan app.log -days 30
  isolderthan backup.tar -weeks 2 -exact
  isolderthan archive.zip -years 1 -months 6
  isolderthan cache.db -months 3 --json""",
)
@click.version_option(version=__version__, prog_name="isolderthan")
@click.argument("filepath")
@click.option(
    "-days", "days", metavar="COUNT", help="Number of days (excludes other time parameters)."
)
@click.option(
    "-weeks", "weeks", metavar="COUNT", help="Number of weeks (excludes other time parameters)."
)
@click.option(
    "-months", "months", metavar="COUNT", help="Number of months (can combine with -years, max 11)."
)
@click.option(
    "-years", "years", metavar="COUNT", help="Number of years (can combine with -months)."
)
@click.option(
    "-exact", "exact", is_flag=True, help="Use exact current time instead of end of previous day."
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="No output on success; exit code only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    filepath: str,
    days: str | None,
    weeks: str | None,
    months: str | None,
    years: str | None,
    exact: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Check if FILEPATH is older than a specified time period.

    Default: 6 months if no time specification provided.
    """
    from isolderthan.domain.thresholds import ThresholdOptions
    from isolderthan.services.age import AgeCheckService

    settings = IsOlderThanSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    options = ThresholdOptions(days=days, weeks=weeks, months=months, years=years, exact=exact)
    ctx.obj.emit(AgeCheckService().check(filepath, options))
