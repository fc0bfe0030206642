"""Enums and limits shared across the threshold engine."""

from __future__ import annotations

from enum import StrEnum


class ReferenceMode(StrEnum):
    """Anchor from which the threshold is subtracted."""

    END_OF_PREVIOUS_DAY = "end_of_previous_day"
    EXACT_NOW = "exact_now"


class VerdictKind(StrEnum):
    """Outcome of comparing a file's modification time to the target."""

    OLDER = "older"
    NOT_OLDER = "not_older"


class ErrorCode(StrEnum):
    """Failure categories. Each maps to one process exit code."""

    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_VALUE = "invalid_value"
    INVALID_COMBINATION = "invalid_combination"
    FILE_NOT_FOUND = "file_not_found"
    FILE_ACCESS = "file_access"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ARGUMENTS: "Invalid arguments",
    ErrorCode.FILE_NOT_FOUND: "File not found",
    ErrorCode.FILE_ACCESS: "File access error",
    ErrorCode.INVALID_COMBINATION: "Invalid parameter combination",
    ErrorCode.INVALID_VALUE: "Invalid parameter value",
}


def describe_error(code: str) -> str:
    """Short human-readable name for an error code."""
    try:
        return ERROR_MESSAGES[ErrorCode(code)]
    except ValueError:
        return "Unknown error"


# --- Defaults and bounds ---

DEFAULT_MONTHS = 6
MAX_MONTHS_WITH_YEARS = 11

SECONDS_PER_DAY = 86400
DAYS_PER_WEEK = 7

MAX_DAYS = 365_000
MAX_WEEKS = MAX_DAYS // DAYS_PER_WEEK
MAX_MONTHS = 12_000
MAX_YEARS = 1000

MAX_OFFSET_SECONDS = MAX_DAYS * SECONDS_PER_DAY

# Supported calendar range for month/year arithmetic (inclusive).
MIN_YEAR = 1
MAX_YEAR = 3000
