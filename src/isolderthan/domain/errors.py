"""Exception hierarchy for the threshold engine.

Every error carries an :class:`ErrorCode`. The service layer turns these
into ``ServiceResult`` failures; only the CLI maps codes to exit statuses.
"""

from __future__ import annotations

from typing import Any

from isolderthan.domain.types import ErrorCode


class IsOlderThanError(Exception):
    """Base class for all expected failures."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENTS

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidValueError(IsOlderThanError):
    """A numeric option is malformed, non-positive, or out of range."""

    code = ErrorCode.INVALID_VALUE

    def __init__(self, message: str, *, rule: str, **detail: Any) -> None:
        super().__init__(message, rule=rule, **detail)
        self.rule = rule


class UnrepresentableDateError(InvalidValueError):
    """A calendar computation left the supported range or overflowed."""

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message, rule="representable", **detail)


class InvalidCombinationError(IsOlderThanError):
    """Mutually exclusive or over-limit threshold options."""

    code = ErrorCode.INVALID_COMBINATION

    def __init__(self, message: str, *, rule: str, **detail: Any) -> None:
        super().__init__(message, rule=rule, **detail)
        self.rule = rule


class FileMissingError(IsOlderThanError):
    """The probed path does not exist."""

    code = ErrorCode.FILE_NOT_FOUND


class FileAccessError(IsOlderThanError):
    """The probed path exists but its metadata could not be read."""

    code = ErrorCode.FILE_ACCESS
