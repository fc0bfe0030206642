"""AgeCheckService: decide whether a file is older than a threshold.

One call runs the whole pipeline in order:
validate options -> probe the file -> resolve the target -> decide.
Malformed input fails before the filesystem is touched. A modification
time later than the clock is reported as a warning on the result.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import structlog
from dateutil import tz

from isolderthan.domain.decision import decide, format_instant
from isolderthan.domain.errors import IsOlderThanError
from isolderthan.domain.resolver import anchor_instant, resolve_target
from isolderthan.domain.thresholds import ThresholdOptions, describe_threshold, validate_options
from isolderthan.infrastructure.filesystem import get_modified_time
from isolderthan.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)

OP_NAME = "is_older_than"

Clock = Callable[[], datetime]
FileTimeProbe = Callable[[Path], datetime]


def local_now() -> datetime:
    """Current instant in the host's local calendar."""
    return datetime.now(tz.tzlocal())


class AgeCheckService:
    """Runs one age check.

    The clock and the file-time probe are injected so tests can pin both.

    Usage::

        svc = AgeCheckService()
        result = svc.check(Path("app.log"), ThresholdOptions(days="30"))
        if result.ok and result.data["older"]:
            ...
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        probe: FileTimeProbe | None = None,
    ) -> None:
        self._clock = clock or local_now
        self._probe = probe or get_modified_time

    def check(self, path: Path | str, options: ThresholdOptions) -> ServiceResult:
        """Check *path* against the threshold described by *options*."""
        target_path = Path(path)
        with structlog.contextvars.bound_contextvars(op=OP_NAME, path=str(target_path)):
            return self._check(target_path, options)

    def _check(self, target_path: Path, options: ThresholdOptions) -> ServiceResult:
        try:
            spec, mode = validate_options(options)
            file_instant = self._probe(target_path)
            now = self._clock()
            anchor = anchor_instant(mode, now)
            target = resolve_target(mode, spec, now)
        except IsOlderThanError as exc:
            logger.debug("age_check_failed", code=str(exc.code), error=exc.message)
            return ServiceResult(ok=False, op=OP_NAME, error=ServiceError.from_exception(exc))

        verdict = decide(file_instant, target)
        warnings: list[str] = []
        if file_instant > now:
            warnings.append(
                f"File modification time {format_instant(file_instant)} "
                f"is later than the current time {format_instant(now)}"
            )
        logger.debug(
            "age_check_resolved",
            anchor=anchor,
            target=target,
            file_modified=file_instant,
            verdict=str(verdict.kind),
        )
        return ServiceResult(
            ok=True,
            op=OP_NAME,
            data={
                "path": str(target_path),
                "verdict": str(verdict.kind),
                "older": verdict.is_older,
                "file_modified": format_instant(verdict.file_instant),
                "reference_time": format_instant(verdict.target_instant),
                "file_modified_ts": verdict.file_instant.timestamp(),
                "reference_ts": verdict.target_instant.timestamp(),
            },
            warnings=warnings,
            meta={
                "threshold": spec.model_dump(),
                "threshold_text": describe_threshold(spec),
                "reference_mode": str(mode),
                "anchor": format_instant(anchor),
            },
        )
