"""Calendar arithmetic on local wall-clock instants.

All functions are pure: they take a :class:`~datetime.datetime` and return
a new one, never mutating shared calendar state. Month and year shifts act
on the wall-clock fields in the instant's own ``tzinfo``; when the shifted
wall-clock time does not exist (a DST gap) it is moved forward, the same
way a local-time conversion normalizes it.

INVARIANT: Results outside ``MIN_YEAR..MAX_YEAR`` are never returned.
They raise :class:`UnrepresentableDateError` instead.
"""

from __future__ import annotations

from datetime import datetime

from dateutil import tz

from isolderthan.domain.errors import UnrepresentableDateError
from isolderthan.domain.types import MAX_YEAR, MIN_YEAR

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Year shifts beyond this magnitude are applied in YEAR_STEP increments.
YEAR_STEP_THRESHOLD = 100
YEAR_STEP = 50


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in *month* (1-12) of *year*.

    Raises:
        ValueError: If *month* is outside 1-12.
    """
    if not 1 <= month <= 12:
        msg = f"Month must be in 1..12, got {month}"
        raise ValueError(msg)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry or borrow an out-of-range month into the year field.

    Examples:
        >>> normalize_month(2024, 13)
        (2025, 1)
        >>> normalize_month(2024, 0)
        (2023, 12)
        >>> normalize_month(2024, -11)
        (2023, 1)
    """
    carry, month_index = divmod(month - 1, 12)
    return year + carry, month_index + 1


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp *day* to the last day of the given month."""
    return min(day, days_in_month(month, year))


def ensure_supported_year(year: int) -> None:
    """Raise :class:`UnrepresentableDateError` if *year* is out of range."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        msg = f"Date out of supported range (year {year}, allowed {MIN_YEAR}-{MAX_YEAR})"
        raise UnrepresentableDateError(msg, year=year)


def _rebuild(instant: datetime, year: int, month: int, day: int) -> datetime:
    """Replace the date fields of *instant*, keeping time of day and zone."""
    ensure_supported_year(year)
    try:
        shifted = instant.replace(year=year, month=month, day=day)
        return tz.resolve_imaginary(shifted)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"Cannot represent {year:04d}-{month:02d}-{day:02d} in the local calendar"
        raise UnrepresentableDateError(msg, year=year) from exc


def add_months(instant: datetime, delta: int) -> datetime:
    """Shift *instant* by *delta* calendar months.

    The day of month is clamped to the target month's length, so
    Jan 31 + 1 month is Feb 28 (or 29), never early March.
    """
    if delta == 0:
        return instant
    year, month = normalize_month(instant.year, instant.month + delta)
    ensure_supported_year(year)
    return _rebuild(instant, year, month, clamp_day(year, month, instant.day))


def _shift_years(instant: datetime, delta: int, day: int) -> datetime:
    year = instant.year + delta
    ensure_supported_year(year)
    return _rebuild(instant, year, instant.month, clamp_day(year, instant.month, day))


def add_years(instant: datetime, delta: int) -> datetime:
    """Shift *instant* by *delta* calendar years.

    Feb 29 maps to Feb 28 when the target year is not a leap year.
    Shifts larger than ``YEAR_STEP_THRESHOLD`` are decomposed into
    ``YEAR_STEP`` increments (remainder last). Every increment clamps the
    source day of month against its own year, so the result depends only
    on the final year; the first unrepresentable step aborts the shift.
    """
    if delta == 0:
        return instant
    day = instant.day
    if abs(delta) <= YEAR_STEP_THRESHOLD:
        return _shift_years(instant, delta, day)

    step = YEAR_STEP if delta > 0 else -YEAR_STEP
    result = instant
    remaining = delta
    while remaining:
        chunk = step if abs(remaining) > YEAR_STEP else remaining
        result = _shift_years(result, chunk, day)
        remaining -= chunk
    return result
