"""Recurrence rates and the number of repetitions they produce.

A frequency is "N times per period". Over a flat interval the repetition count
uses the same seconds-pivot table as duration conversion; between two actual
dates it counts whole calendar periods with python-dateutil's relativedelta.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from fractions import Fraction
from typing import Any, Literal, TypeAlias

from dateutil.relativedelta import relativedelta

from timeprofit.duration import Duration, Unit, seconds_per_unit
from timeprofit.errors import UnknownFrequencyError

Period: TypeAlias = Literal["daily", "weekly", "monthly", "yearly"]

# Mapping from frequency periods to the duration unit they count
_PERIOD_UNITS: dict[Period, Unit] = {
    "daily": "days",
    "weekly": "weeks",
    "monthly": "months",
    "yearly": "years",
}


def period_unit(frequency: Period) -> Unit:
    """Return the duration unit one `frequency` period is measured in.

    Raises:
        UnknownFrequencyError: If `frequency` is not a known period
    """
    try:
        return _PERIOD_UNITS[frequency]
    except (KeyError, TypeError):
        raise UnknownFrequencyError(frequency, _PERIOD_UNITS) from None


@dataclass(frozen=True, kw_only=True)
class Frequency:
    value: float
    frequency: Period

    def __post_init__(self) -> None:
        period_unit(self.frequency)

    def __str__(self) -> str:
        return f"{self.value:g} {self.frequency}"


def repetitions_from_frequency(*, frequency: Frequency, interval: Duration) -> int:
    """
    Count how many times a recurring task happens within an interval.

    The interval is converted to a fractional number of the frequency's period
    and multiplied by the rate; only that final product is floored.

    Args:
        frequency: How often the task happens
        interval: Span of time to count occurrences over

    Returns:
        Whole number of occurrences

    Raises:
        UnknownFrequencyError: If the frequency period is not known
        UnknownUnitError: If the interval unit is not known

    Example:
        >>> repetitions_from_frequency(
        ...     frequency=Frequency(value=50, frequency="daily"),
        ...     interval=Duration(value=5, unit="years"),
        ... )
        91310
    """
    # Exact arithmetic so whole-number products are not floored to one less
    seconds = Fraction(interval.value) * Fraction(seconds_per_unit(interval.unit))
    periods = seconds / Fraction(seconds_per_unit(period_unit(frequency.frequency)))
    return math.floor(periods * Fraction(frequency.value))


def _coerce_moment(moment: Any, edge: Literal["start", "end"]) -> datetime:
    """Convert a date or timezone-aware datetime into an aware datetime.

    Dates are taken as midnight UTC.

    Raises:
        TypeError: If moment is a naive datetime or an unsupported type
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is None:
            raise TypeError(
                f"Repetition {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {moment!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return moment
    if isinstance(moment, date):
        return datetime.combine(moment, time.min, tzinfo=timezone.utc)
    raise TypeError(
        f"Repetition {edge} must be a date or datetime.\n"
        f"Got {type(moment).__name__!r}: {moment!r}"
    )


def _whole_periods(frequency: Period, start: datetime, end: datetime) -> int:
    if frequency == "daily":
        return (end - start) // timedelta(days=1)
    if frequency == "weekly":
        return (end - start) // timedelta(weeks=1)

    # Months and years vary in length, so count them on the calendar
    delta = relativedelta(end, start)
    months = delta.years * 12 + delta.months
    if frequency == "monthly":
        return months
    return months // 12


def repetitions_between(
    *, frequency: Frequency, start: date | datetime, end: date | datetime
) -> int:
    """
    Count occurrences of a recurring task between two calendar moments.

    Only whole periods are counted: a monthly task from Jan 31 to Feb 27 has
    not completed a month yet. Reversed bounds give zero.

    Args:
        frequency: How often the task happens
        start: Beginning of the span (date, or timezone-aware datetime)
        end: End of the span (date, or timezone-aware datetime)

    Returns:
        Whole number of occurrences

    Raises:
        UnknownFrequencyError: If the frequency period is not known
        TypeError: If a bound is naive or not a date/datetime

    Example:
        >>> from datetime import date
        >>> repetitions_between(
        ...     frequency=Frequency(value=2, frequency="monthly"),
        ...     start=date(2024, 1, 15),
        ...     end=date(2024, 7, 15),
        ... )
        12
    """
    period_unit(frequency.frequency)
    start_dt = _coerce_moment(start, "start")
    end_dt = _coerce_moment(end, "end")
    if end_dt <= start_dt:
        return 0

    periods = _whole_periods(frequency.frequency, start_dt, end_dt)
    return math.floor(periods * frequency.value)
