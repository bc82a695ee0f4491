from .duration import (
    Duration,
    Unit,
    days_in_duration,
    in_unit,
    months_in_duration,
    seconds_from_duration,
    seconds_per_unit,
    weeks_in_duration,
    years_in_duration,
)
from .errors import UnknownFrequencyError, UnknownUnitError
from .frequency import (
    Frequency,
    Period,
    repetitions_between,
    repetitions_from_frequency,
)
from .humanize import describe, largest_unit
from .profit import ProfitReport, Verdict, report, time_profit, verdict
from .query import ProfitQuery, load, parse_query

__all__ = [
    "Duration",
    "Unit",
    "Frequency",
    "Period",
    "UnknownUnitError",
    "UnknownFrequencyError",
    "seconds_per_unit",
    "seconds_from_duration",
    "in_unit",
    "days_in_duration",
    "weeks_in_duration",
    "months_in_duration",
    "years_in_duration",
    "repetitions_from_frequency",
    "repetitions_between",
    "time_profit",
    "verdict",
    "report",
    "ProfitReport",
    "Verdict",
    "describe",
    "largest_unit",
    "ProfitQuery",
    "parse_query",
    "load",
]
