"""Tests for duration unit conversion."""

import math

import pytest

from timeprofit import (
    Duration,
    UnknownUnitError,
    days_in_duration,
    in_unit,
    months_in_duration,
    seconds_from_duration,
    seconds_per_unit,
    weeks_in_duration,
    years_in_duration,
)


def test_seconds_from_each_unit():
    """Test that every known unit converts to the expected seconds."""
    assert seconds_from_duration(Duration(value=5, unit="seconds")) == 5
    assert seconds_from_duration(Duration(value=5, unit="minutes")) == 300
    assert seconds_from_duration(Duration(value=2, unit="hours")) == 7200
    assert seconds_from_duration(Duration(value=1, unit="days")) == 86400
    assert seconds_from_duration(Duration(value=1, unit="weeks")) == 604800
    # Months are a flat 30 days
    assert seconds_from_duration(Duration(value=1, unit="months")) == 2592000
    # Years are the mean Gregorian year (365.2425 days)
    assert seconds_from_duration(Duration(value=1, unit="years")) == 31556952


def test_fractional_durations():
    """Test that fractional values convert without rounding."""
    assert seconds_from_duration(Duration(value=1.5, unit="minutes")) == 90
    assert days_in_duration(Duration(value=12, unit="hours")) == 0.5


def test_named_unit_conversions():
    """Test the days/weeks/months/years helpers."""
    assert days_in_duration(Duration(value=2, unit="weeks")) == 14
    assert weeks_in_duration(Duration(value=14, unit="days")) == 2
    assert months_in_duration(Duration(value=90, unit="days")) == 3
    assert years_in_duration(Duration(value=365.2425, unit="days")) == pytest.approx(1)
    assert months_in_duration(Duration(value=1, unit="years")) == pytest.approx(
        365.2425 / 30
    )


def test_conversions_pivot_through_seconds():
    """Test that converting via another unit matches converting directly."""
    direct = in_unit(Duration(value=300, unit="seconds"), "hours")
    via_minutes = in_unit(Duration(value=5, unit="minutes"), "hours")
    assert direct == via_minutes

    ninety_days = Duration(value=90, unit="days")
    assert weeks_in_duration(ninety_days) == pytest.approx(
        in_unit(ninety_days.to("months"), "weeks")
    )


def test_years_round_trip_through_seconds():
    """Test that seconds -> years -> seconds returns the original value."""
    for seconds in (1, 59, 86400, 123456789, 10**10):
        years = years_in_duration(Duration(value=seconds, unit="seconds"))
        back = seconds_from_duration(Duration(value=years, unit="years"))
        assert back == pytest.approx(seconds)


def test_duration_to_and_seconds_property():
    """Test the Duration convenience accessors."""
    duration = Duration(value=3, unit="hours")
    assert duration.seconds == 10800
    assert duration.to("minutes") == Duration(value=180, unit="minutes")


def test_duration_str():
    """Test human-friendly string for a duration."""
    assert str(Duration(value=5, unit="minutes")) == "5 minutes"
    assert str(Duration(value=1.5, unit="hours")) == "1.5 hours"


def test_negative_and_nan_values_pass_through():
    """Test that values are not validated, only units."""
    assert seconds_from_duration(Duration(value=-2, unit="minutes")) == -120
    assert math.isnan(seconds_from_duration(Duration(value=math.nan, unit="days")))


def test_unknown_unit_rejected_at_construction():
    """Test that an unknown unit raises a typed error naming valid units."""
    with pytest.raises(UnknownUnitError) as excinfo:
        Duration(value=1, unit="fortnights")  # type: ignore[arg-type]

    assert excinfo.value.unit == "fortnights"
    assert "Valid units: seconds, minutes" in str(excinfo.value)


def test_unknown_unit_rejected_at_conversion():
    """Test that conversions raise for unknown units instead of returning 0."""
    with pytest.raises(UnknownUnitError):
        seconds_per_unit("decades")  # type: ignore[arg-type]

    with pytest.raises(UnknownUnitError):
        in_unit(Duration(value=1, unit="days"), "decades")  # type: ignore[arg-type]


def test_unknown_unit_error_is_value_error():
    """Test that unit errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        seconds_per_unit(None)  # type: ignore[arg-type]
