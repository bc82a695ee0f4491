"""Durations and conversions between time units.

Every conversion pivots through seconds: a duration is first turned into
seconds using a fixed seconds-per-unit table, then divided by the target
unit's size. This keeps the unit table the only place conversion factors live.

Example:
    >>> from timeprofit import Duration, days_in_duration
    >>> days_in_duration(Duration(value=2, unit="weeks"))
    14.0
"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from timeprofit.errors import UnknownUnitError
from timeprofit.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

Unit: TypeAlias = Literal[
    "seconds", "minutes", "hours", "days", "weeks", "months", "years"
]

# Ordered smallest to largest
SCALES: dict[Unit, float] = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
    "months": MONTH,
    "years": YEAR,
}


def seconds_per_unit(unit: Unit) -> float:
    """Return the number of seconds in one `unit`.

    Raises:
        UnknownUnitError: If `unit` is not one of the known units
    """
    try:
        return SCALES[unit]
    except (KeyError, TypeError):
        raise UnknownUnitError(unit, SCALES) from None


@dataclass(frozen=True, kw_only=True)
class Duration:
    value: float
    unit: Unit

    def __post_init__(self) -> None:
        # Durations built from parsed strings skip the type checker
        seconds_per_unit(self.unit)

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}"

    @property
    def seconds(self) -> float:
        return seconds_from_duration(self)

    def to(self, unit: Unit) -> "Duration":
        """Return an equivalent duration expressed in `unit`."""
        return Duration(value=in_unit(self, unit), unit=unit)


def seconds_from_duration(duration: Duration) -> float:
    """Convert a duration to seconds (may be fractional)."""
    return duration.value * seconds_per_unit(duration.unit)


def in_unit(duration: Duration, unit: Unit) -> float:
    """Convert a duration to a (possibly fractional) count of `unit`.

    Args:
        duration: Duration to convert
        unit: Target unit

    Returns:
        `duration` expressed as a number of `unit`

    Raises:
        UnknownUnitError: If either unit is not one of the known units
    """
    return seconds_from_duration(duration) / seconds_per_unit(unit)


def days_in_duration(duration: Duration) -> float:
    return in_unit(duration, "days")


def weeks_in_duration(duration: Duration) -> float:
    return in_unit(duration, "weeks")


def months_in_duration(duration: Duration) -> float:
    return in_unit(duration, "months")


def years_in_duration(duration: Duration) -> float:
    return in_unit(duration, "years")
