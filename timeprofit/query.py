"""Load a time-profit calculation from URL query parameters.

Parameters (all numbers are parsed from text):

- ``taskTimeSaved`` / ``taskTimeSavedUnit``: time saved per run
- ``taskRepetitions``: number of runs, or instead
  ``frequency`` / ``frequencyPeriod`` / ``interval`` / ``intervalUnit``
- ``timeToAutomate`` / ``timeToAutomateUnit``: one-time automation cost
- ``resources``: people spending the automation time

Anything missing or unparseable means there is nothing to compute, so the
loader returns ``None`` instead of raising.
"""

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import parse_qs

from timeprofit.duration import Duration, Unit
from timeprofit.errors import UnknownFrequencyError, UnknownUnitError
from timeprofit.frequency import Frequency, repetitions_from_frequency
from timeprofit.profit import ProfitReport, report, time_profit

logger = logging.getLogger(__name__)

DEFAULT_UNIT: Unit = "seconds"
DEFAULT_INTERVAL_UNIT: Unit = "years"
DEFAULT_RESOURCES = 1.0

QueryParams = str | Mapping[str, str | Sequence[str]]


class _MissingParameter(Exception):
    pass


@dataclass(frozen=True, kw_only=True)
class ProfitQuery:
    task_time_saved: Duration
    task_repetitions: int
    time_to_automate: Duration
    resources: float = DEFAULT_RESOURCES

    def profit(self) -> float:
        return time_profit(
            task_time_saved=self.task_time_saved,
            task_repetitions=self.task_repetitions,
            time_to_automate=self.time_to_automate,
            resources=self.resources,
        )


def _normalize(params: QueryParams) -> dict[str, str]:
    if isinstance(params, str):
        params = parse_qs(params.lstrip("?"))
    normalized: dict[str, str] = {}
    for name, value in params.items():
        if isinstance(value, str):
            normalized[name] = value
        elif value:
            # parse_qs style: first value wins
            normalized[name] = value[0]
    return normalized


def _get(params: dict[str, str], name: str, default: str | None = None) -> str:
    raw = params.get(name, "").strip()
    if raw:
        return raw
    if default is not None:
        return default
    raise _MissingParameter(name)


def _number(params: dict[str, str], name: str, default: str | None = None) -> float:
    raw = _get(params, name, default)
    number = float(raw)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    return number


def _duration(params: dict[str, str], name: str, default_unit: Unit) -> Duration:
    return Duration(
        value=_number(params, name),
        unit=_get(params, f"{name}Unit", default_unit),  # type: ignore[arg-type]
    )


def _repetitions(params: dict[str, str]) -> int:
    if params.get("taskRepetitions", "").strip():
        return math.floor(_number(params, "taskRepetitions"))
    frequency = Frequency(
        value=_number(params, "frequency"),
        frequency=_get(params, "frequencyPeriod"),  # type: ignore[arg-type]
    )
    interval = _duration(params, "interval", DEFAULT_INTERVAL_UNIT)
    return repetitions_from_frequency(frequency=frequency, interval=interval)


def parse_query(params: QueryParams) -> ProfitQuery | None:
    """
    Parse query parameters into a profit query.

    Args:
        params: Raw query string (with or without a leading "?"), or a mapping
            of parameter names to a string or list of strings

    Returns:
        The parsed query, or None if a parameter is missing or invalid

    Example:
        >>> parse_query("taskTimeSaved=5&taskTimeSavedUnit=minutes"
        ...             "&taskRepetitions=90&timeToAutomate=45"
        ...             "&timeToAutomateUnit=minutes")
        ProfitQuery(task_time_saved=Duration(value=5.0, unit='minutes'), ...)
    """
    values = _normalize(params)
    try:
        return ProfitQuery(
            task_time_saved=_duration(values, "taskTimeSaved", DEFAULT_UNIT),
            task_repetitions=_repetitions(values),
            time_to_automate=_duration(values, "timeToAutomate", DEFAULT_UNIT),
            resources=_number(values, "resources", str(DEFAULT_RESOURCES)),
        )
    except _MissingParameter as e:
        logger.debug("Skipping time profit, missing parameter: %s", e)
    except (UnknownUnitError, UnknownFrequencyError) as e:
        logger.debug("Skipping time profit, unknown name: %s", e)
    except (ValueError, OverflowError) as e:
        logger.debug("Skipping time profit, invalid number: %s", e)
    return None


def load(params: QueryParams) -> ProfitReport | None:
    """Parse query parameters and report the resulting profit, if any."""
    query = parse_query(params)
    if query is None:
        return None
    try:
        profit = query.profit()
    except OverflowError as e:
        logger.debug("Skipping time profit, result out of range: %s", e)
        return None
    if not math.isfinite(profit):
        logger.debug("Skipping time profit, result is not finite: %s", profit)
        return None
    return report(profit)
