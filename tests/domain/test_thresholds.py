"""Tests for threshold option validation."""

import pytest
from pydantic import ValidationError

from isolderthan.domain.errors import InvalidCombinationError, InvalidValueError
from isolderthan.domain.thresholds import (
    DaysThreshold,
    DefaultThreshold,
    MonthsYearsThreshold,
    ThresholdOptions,
    WeeksThreshold,
    describe_threshold,
    parse_count,
    validate_options,
)
from isolderthan.domain.types import MAX_MONTHS, ErrorCode, ReferenceMode


class TestParseCount:
    def test_plain_integer(self) -> None:
        assert parse_count("days", "30") == 30

    def test_leading_plus(self) -> None:
        assert parse_count("weeks", "+7") == 7

    @pytest.mark.parametrize("raw", ["abc", "12abc", "", " 5", "5 ", "1.5", "0x10", "1e3"])
    def test_rejects_partial_or_non_numeric(self, raw: str) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            parse_count("days", raw)
        assert exc_info.value.rule == "integer"

    @pytest.mark.parametrize("raw", ["0", "-3", "+0"])
    def test_rejects_non_positive(self, raw: str) -> None:
        with pytest.raises(InvalidValueError, match="Days must be positive") as exc_info:
            parse_count("days", raw)
        assert exc_info.value.rule == "positive"

    def test_upper_bound_inclusive(self) -> None:
        assert parse_count("days", "365000") == 365000
        assert parse_count("years", "1000") == 1000

    @pytest.mark.parametrize(
        "name,raw",
        [("days", "365001"), ("weeks", "52143"), ("months", "12001"), ("years", "10000")],
    )
    def test_rejects_absurd_magnitudes(self, name: str, raw: str) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            parse_count(name, raw)
        assert exc_info.value.rule == "bound"
        assert exc_info.value.code == ErrorCode.INVALID_VALUE

    def test_huge_digit_string(self) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            parse_count("years", "9" * 50)
        assert exc_info.value.rule == "bound"


class TestValidateOptions:
    def test_no_options_is_default(self) -> None:
        spec, mode = validate_options(ThresholdOptions())
        assert spec == DefaultThreshold()
        assert mode is ReferenceMode.END_OF_PREVIOUS_DAY

    def test_exact_sets_reference_mode(self) -> None:
        spec, mode = validate_options(ThresholdOptions(exact=True))
        assert spec == DefaultThreshold()
        assert mode is ReferenceMode.EXACT_NOW

    def test_exact_combines_with_anything(self) -> None:
        spec, mode = validate_options(ThresholdOptions(days="3", exact=True))
        assert spec == DaysThreshold(days=3)
        assert mode is ReferenceMode.EXACT_NOW

    def test_days(self) -> None:
        spec, _ = validate_options(ThresholdOptions(days="30"))
        assert spec == DaysThreshold(days=30)

    def test_weeks(self) -> None:
        spec, _ = validate_options(ThresholdOptions(weeks="2"))
        assert spec == WeeksThreshold(weeks=2)

    def test_months_only(self) -> None:
        spec, _ = validate_options(ThresholdOptions(months="18"))
        assert spec == MonthsYearsThreshold(months=18, years=0)

    def test_years_only(self) -> None:
        spec, _ = validate_options(ThresholdOptions(years="2"))
        assert spec == MonthsYearsThreshold(months=0, years=2)

    def test_months_and_years(self) -> None:
        spec, _ = validate_options(ThresholdOptions(months="11", years="1"))
        assert spec == MonthsYearsThreshold(months=11, years=1)

    def test_days_with_months_is_combination_error(self) -> None:
        with pytest.raises(InvalidCombinationError) as exc_info:
            validate_options(ThresholdOptions(days="3", months="2"))
        assert exc_info.value.rule == "days-exclusive"
        assert exc_info.value.code == ErrorCode.INVALID_COMBINATION
        assert exc_info.value.message == "-days excludes all other time parameters"

    def test_days_with_weeks(self) -> None:
        with pytest.raises(InvalidCombinationError) as exc_info:
            validate_options(ThresholdOptions(days="3", weeks="2"))
        assert exc_info.value.rule == "days-exclusive"

    def test_weeks_with_years(self) -> None:
        with pytest.raises(InvalidCombinationError) as exc_info:
            validate_options(ThresholdOptions(weeks="3", years="2"))
        assert exc_info.value.rule == "weeks-exclusive"

    def test_twelve_months_with_years_exceeds_cap(self) -> None:
        with pytest.raises(InvalidCombinationError, match="maximum value of 11") as exc_info:
            validate_options(ThresholdOptions(months="12", years="1"))
        assert exc_info.value.rule == "months-with-years"

    def test_twelve_months_alone_is_fine(self) -> None:
        spec, _ = validate_options(ThresholdOptions(months="12"))
        assert spec == MonthsYearsThreshold(months=12)

    def test_value_errors_reported_before_combination(self) -> None:
        with pytest.raises(InvalidValueError):
            validate_options(ThresholdOptions(days="x", months="3"))

    def test_extreme_years_is_value_error(self) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            validate_options(ThresholdOptions(years="10000"))
        assert exc_info.value.detail["option"] == "years"


class TestThresholdModels:
    def test_frozen(self) -> None:
        spec = DaysThreshold(days=3)
        with pytest.raises(ValidationError):
            spec.days = 4  # type: ignore[misc]

    def test_days_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            DaysThreshold(days=0)

    def test_dump_includes_kind(self) -> None:
        assert MonthsYearsThreshold(months=3, years=1).model_dump() == {
            "kind": "months_years",
            "months": 3,
            "years": 1,
        }

    def test_supplied_lists_given_options(self) -> None:
        options = ThresholdOptions(years="1", months="2", exact=True)
        assert options.supplied() == ["months", "years"]

    def test_months_years_needs_a_count(self) -> None:
        with pytest.raises(ValidationError, match="At least one of months or years"):
            MonthsYearsThreshold()

    def test_months_capped_when_combined_with_years(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed 11"):
            MonthsYearsThreshold(months=12, years=1)

    @pytest.mark.parametrize(
        "months,years", [(11, 1), (12, 0), (0, 5), (MAX_MONTHS, 0)]
    )
    def test_months_years_accepts_valid_counts(self, months: int, years: int) -> None:
        spec = MonthsYearsThreshold(months=months, years=years)
        assert (spec.months, spec.years) == (months, years)


class TestDescribeThreshold:
    @pytest.mark.parametrize(
        "spec,expected",
        [
            (DaysThreshold(days=5), "5 day(s)"),
            (WeeksThreshold(weeks=2), "2 week(s)"),
            (MonthsYearsThreshold(months=3, years=1), "1 year(s), 3 month(s)"),
            (MonthsYearsThreshold(years=2), "2 year(s)"),
            (DefaultThreshold(), "6 month(s) (default)"),
        ],
    )
    def test_text(self, spec, expected: str) -> None:
        assert describe_threshold(spec) == expected
