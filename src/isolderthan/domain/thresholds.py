"""Threshold specifications and option validation.

A threshold is exactly one of four variants: ``days``, ``weeks``,
``months_years`` or ``default``. :func:`validate_options` is the only way
raw command-line values become a :data:`ThresholdSpec`.

Validation order:
  1. Every supplied count must be a whole integer, positive, and within
     its magnitude bound (``InvalidValueError``).
  2. Combination rules are checked afterwards (``InvalidCombinationError``).
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from isolderthan.domain.errors import InvalidCombinationError, InvalidValueError
from isolderthan.domain.types import (
    DEFAULT_MONTHS,
    MAX_DAYS,
    MAX_MONTHS,
    MAX_MONTHS_WITH_YEARS,
    MAX_WEEKS,
    MAX_YEARS,
    ReferenceMode,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

COUNT_BOUNDS: dict[str, int] = {
    "days": MAX_DAYS,
    "weeks": MAX_WEEKS,
    "months": MAX_MONTHS,
    "years": MAX_YEARS,
}


# --- Threshold variants ---


class DaysThreshold(BaseModel):
    """Subtract a number of 24-hour days."""

    model_config = {"frozen": True}

    kind: Literal["days"] = "days"
    days: int = Field(gt=0, le=MAX_DAYS)


class WeeksThreshold(BaseModel):
    """Subtract a number of 7-day weeks."""

    model_config = {"frozen": True}

    kind: Literal["weeks"] = "weeks"
    weeks: int = Field(gt=0, le=MAX_WEEKS)


class MonthsYearsThreshold(BaseModel):
    """Subtract calendar years first, then calendar months."""

    model_config = {"frozen": True}

    kind: Literal["months_years"] = "months_years"
    months: int = Field(default=0, ge=0, le=MAX_MONTHS)
    years: int = Field(default=0, ge=0, le=MAX_YEARS)

    @model_validator(mode="after")
    def _check_counts(self) -> MonthsYearsThreshold:
        if self.months == 0 and self.years == 0:
            msg = "At least one of months or years must be positive"
            raise ValueError(msg)
        if self.years > 0 and self.months > MAX_MONTHS_WITH_YEARS:
            msg = f"months must not exceed {MAX_MONTHS_WITH_YEARS} when combined with years"
            raise ValueError(msg)
        return self


class DefaultThreshold(BaseModel):
    """No threshold given: six calendar months."""

    model_config = {"frozen": True}

    kind: Literal["default"] = "default"


ThresholdSpec = Annotated[
    DaysThreshold | WeeksThreshold | MonthsYearsThreshold | DefaultThreshold,
    Field(discriminator="kind"),
]


# --- Raw input ---


class ThresholdOptions(BaseModel):
    """Threshold options exactly as they arrived on the command line.

    Counts are kept as strings so that parsing failures are reported by
    :func:`validate_options` rather than by the argument tokenizer.
    """

    model_config = {"frozen": True}

    days: str | None = None
    weeks: str | None = None
    months: str | None = None
    years: str | None = None
    exact: bool = False

    def supplied(self) -> list[str]:
        """Names of the threshold options that were given."""
        return [name for name in COUNT_BOUNDS if getattr(self, name) is not None]


# --- Validation ---


def parse_count(name: str, raw: str) -> int:
    """Parse a threshold count, enforcing the full-string and bound rules.

    Raises:
        InvalidValueError: With ``rule`` set to ``integer``, ``positive``
            or ``bound``.
    """
    label = name.capitalize()
    if not _INTEGER_RE.fullmatch(raw):
        msg = f"{label} must be a whole number, got '{raw}'"
        raise InvalidValueError(msg, rule="integer", option=name, value=raw)
    try:
        value = int(raw)
    except ValueError as exc:
        # Digit strings beyond the interpreter's int conversion limit.
        msg = f"{label} value is too large"
        raise InvalidValueError(msg, rule="bound", option=name, value=raw) from exc
    if value <= 0:
        msg = f"{label} must be positive"
        raise InvalidValueError(msg, rule="positive", option=name, value=raw)
    bound = COUNT_BOUNDS[name]
    if value > bound:
        msg = f"{label} must not exceed {bound}"
        raise InvalidValueError(msg, rule="bound", option=name, value=raw, bound=bound)
    return value


def validate_options(options: ThresholdOptions) -> tuple[ThresholdSpec, ReferenceMode]:
    """Turn raw options into a threshold spec and reference mode.

    Raises:
        InvalidValueError: A count is malformed, non-positive or too large.
        InvalidCombinationError: Options that may not be combined were.
    """
    counts = {name: parse_count(name, getattr(options, name)) for name in options.supplied()}
    mode = ReferenceMode.EXACT_NOW if options.exact else ReferenceMode.END_OF_PREVIOUS_DAY

    for exclusive in ("days", "weeks"):
        if exclusive in counts and len(counts) > 1:
            msg = f"-{exclusive} excludes all other time parameters"
            raise InvalidCombinationError(
                msg, rule=f"{exclusive}-exclusive", options=sorted(counts)
            )

    if "months" in counts and "years" in counts and counts["months"] > MAX_MONTHS_WITH_YEARS:
        msg = (
            "When combined with -years, -months can have maximum value of "
            f"{MAX_MONTHS_WITH_YEARS}"
        )
        raise InvalidCombinationError(msg, rule="months-with-years", months=counts["months"])

    spec: ThresholdSpec
    if "days" in counts:
        spec = DaysThreshold(days=counts["days"])
    elif "weeks" in counts:
        spec = WeeksThreshold(weeks=counts["weeks"])
    elif counts:
        spec = MonthsYearsThreshold(
            months=counts.get("months", 0),
            years=counts.get("years", 0),
        )
    else:
        spec = DefaultThreshold()
    return spec, mode


def describe_threshold(spec: ThresholdSpec) -> str:
    """Human-readable summary, e.g. ``"1 year(s), 3 month(s)"``."""
    if isinstance(spec, DaysThreshold):
        return f"{spec.days} day(s)"
    if isinstance(spec, WeeksThreshold):
        return f"{spec.weeks} week(s)"
    if isinstance(spec, MonthsYearsThreshold):
        parts = []
        if spec.years:
            parts.append(f"{spec.years} year(s)")
        if spec.months:
            parts.append(f"{spec.months} month(s)")
        return ", ".join(parts)
    return f"{DEFAULT_MONTHS} month(s) (default)"
