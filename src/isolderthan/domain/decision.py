"""Compare a file's modification instant against the resolved target."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from isolderthan.domain.types import VerdictKind

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one comparison, with both instants kept for reporting."""

    kind: VerdictKind
    file_instant: datetime
    target_instant: datetime

    @property
    def is_older(self) -> bool:
        return self.kind is VerdictKind.OLDER


def decide(file_instant: datetime, target_instant: datetime) -> Verdict:
    """Older only when the file strictly predates the target."""
    kind = VerdictKind.OLDER if file_instant < target_instant else VerdictKind.NOT_OLDER
    return Verdict(kind=kind, file_instant=file_instant, target_instant=target_instant)


def format_instant(instant: datetime) -> str:
    """Render an instant as ``YYYY-MM-DD HH:MM:SS`` in its own zone."""
    return instant.strftime(DISPLAY_FORMAT)
