"""File modification time lookup.

The only blocking operation of a run. Failures are classified, never
retried: a missing path is distinct from any other access error.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from pathlib import Path

from dateutil import tz

from isolderthan.domain.errors import FileAccessError, FileMissingError

logger = logging.getLogger(__name__)


def get_modified_time(path: Path | str, zone: tzinfo | None = None) -> datetime:
    """Return the last-modified instant of *path* in *zone* (default: local).

    Raises:
        FileMissingError: The path does not exist.
        FileAccessError: Any other failure reading the file's metadata.
    """
    target = Path(path)
    try:
        mtime = target.stat().st_mtime
    except FileNotFoundError as exc:
        logger.debug("stat failed: %s not found", target)
        raise FileMissingError(f"File not found: {target}", path=str(target)) from exc
    except OSError as exc:
        logger.debug("stat failed for %s: %s", target, exc)
        reason = exc.strerror or str(exc)
        raise FileAccessError(
            f"Cannot access file: {target} ({reason})", path=str(target)
        ) from exc

    try:
        return datetime.fromtimestamp(mtime, tz=zone or tz.tzlocal())
    except (OverflowError, OSError, ValueError) as exc:
        raise FileAccessError(
            f"Cannot access file: {target} (unrepresentable modification time)",
            path=str(target),
        ) from exc
