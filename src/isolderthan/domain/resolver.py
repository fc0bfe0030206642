"""Resolve a threshold into the target instant a file is compared against.

``now`` is always passed in; nothing here reads the process clock.
"""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta

from dateutil import tz

from isolderthan.domain.calendar import add_months, add_years, ensure_supported_year
from isolderthan.domain.errors import UnrepresentableDateError
from isolderthan.domain.thresholds import (
    DaysThreshold,
    MonthsYearsThreshold,
    ThresholdSpec,
    WeeksThreshold,
)
from isolderthan.domain.types import (
    DAYS_PER_WEEK,
    DEFAULT_MONTHS,
    MAX_OFFSET_SECONDS,
    SECONDS_PER_DAY,
    ReferenceMode,
)

END_OF_DAY = time(23, 59, 59)


def anchor_instant(mode: ReferenceMode, now: datetime) -> datetime:
    """Starting instant for threshold subtraction.

    ``EXACT_NOW`` returns *now* unchanged. ``END_OF_PREVIOUS_DAY`` returns
    23:59:59 local time on the calendar day before *now*.
    """
    if mode is ReferenceMode.EXACT_NOW:
        return now
    try:
        previous_day = now.date() - timedelta(days=1)
        anchor = datetime.combine(previous_day, END_OF_DAY, tzinfo=now.tzinfo)
        anchor = tz.resolve_imaginary(anchor)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"Cannot compute the end of the day before {now:%Y-%m-%d}"
        raise UnrepresentableDateError(msg) from exc
    ensure_supported_year(anchor.year)
    return anchor


def subtract_days(instant: datetime, days: int) -> datetime:
    """Subtract *days* × 86400 elapsed seconds from *instant*.

    The product is bounded before it is formed. Aware instants are shifted
    in UTC so a DST transition inside the span does not change the elapsed
    time.
    """
    if days < 0 or days > MAX_OFFSET_SECONDS // SECONDS_PER_DAY:
        msg = f"Offset of {days} days is out of range"
        raise UnrepresentableDateError(msg, days=days)
    offset = timedelta(seconds=days * SECONDS_PER_DAY)
    try:
        if instant.tzinfo is None:
            result = instant - offset
        else:
            result = (instant.astimezone(UTC) - offset).astimezone(instant.tzinfo)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"Subtracting {days} days from {instant:%Y-%m-%d} leaves the supported range"
        raise UnrepresentableDateError(msg, days=days) from exc
    ensure_supported_year(result.year)
    return result


def resolve_target(mode: ReferenceMode, spec: ThresholdSpec, now: datetime) -> datetime:
    """Compute the instant a file must predate to count as older.

    Years are subtracted before months, so the base year is fixed before
    the day of month is clamped.

    Raises:
        UnrepresentableDateError: Any intermediate result is out of range.
    """
    anchor = anchor_instant(mode, now)

    if isinstance(spec, DaysThreshold):
        return subtract_days(anchor, spec.days)
    if isinstance(spec, WeeksThreshold):
        if spec.weeks > MAX_OFFSET_SECONDS // (DAYS_PER_WEEK * SECONDS_PER_DAY):
            msg = f"Offset of {spec.weeks} weeks is out of range"
            raise UnrepresentableDateError(msg, weeks=spec.weeks)
        return subtract_days(anchor, spec.weeks * DAYS_PER_WEEK)
    if isinstance(spec, MonthsYearsThreshold):
        target = anchor
        if spec.years > 0:
            target = add_years(target, -spec.years)
        if spec.months > 0:
            target = add_months(target, -spec.months)
        return target
    return add_months(anchor, -DEFAULT_MONTHS)
