"""Rich rendering of isolderthan's terminal lines.

Lines are rendered into a StringIO buffer so formatters return plain
strings. Output written to a pipe or a test capture carries no ANSI codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

APP_THEME = Theme(
    {
        "iot.older": "bold green",
        "iot.not_older": "bold yellow",
        "iot.warning": "bold magenta",
        "iot.key": "dim",
        "iot.time": "bold cyan",
    }
)

# Paths are never wrapped; the width only bounds Rich's layout.
RENDER_WIDTH = 120


def create_console() -> Console:
    """Console rendering into a buffer with markup only: no highlighting or emoji."""
    return Console(
        file=StringIO(),
        theme=APP_THEME,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        width=RENDER_WIDTH,
    )


def render_lines(lines: list[str]) -> str:
    """Render Rich markup *lines*, one per line, without a trailing newline."""
    console = create_console()
    for line in lines:
        console.print(line)
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")
