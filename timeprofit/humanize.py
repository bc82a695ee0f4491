"""Human-readable renderings of second counts."""

import math

from timeprofit.duration import SCALES, Duration


def largest_unit(seconds: float) -> Duration:
    """
    Express `seconds` in the largest unit holding at least one whole unit.

    The value is truncated towards zero, so 45 days reads as 1 month and
    -90 seconds as -1 minute.

    Example:
        >>> largest_unit(432_000)
        Duration(value=5, unit='days')
    """
    magnitude = abs(seconds)
    sign = -1 if seconds < 0 else 1
    for unit, scale in reversed(SCALES.items()):
        if magnitude >= scale:
            return Duration(value=sign * math.floor(magnitude / scale), unit=unit)
    return Duration(value=sign * math.floor(magnitude), unit="seconds")


def describe(seconds: float) -> str:
    """Format seconds as e.g. "4 weeks", using the singular for one unit."""
    duration = largest_unit(seconds)
    unit = duration.unit
    if abs(duration.value) == 1:
        unit = unit[:-1]
    return f"{duration.value} {unit}"
