"""Net time profit of automating a repeated task.

The equation follows https://triplebyte.com/blog/when-task-automation-is-worth-your-time:

    time profit = time saved per run * runs - time to automate * resources
"""

import math
from dataclasses import dataclass
from typing import Literal, TypeAlias

from timeprofit.duration import Duration, seconds_from_duration
from timeprofit.humanize import describe

Verdict: TypeAlias = Literal["automate", "break-even", "dont-automate"]


def time_profit(
    *,
    task_time_saved: Duration,
    task_repetitions: float,
    time_to_automate: Duration,
    resources: float = 1,
) -> float:
    """
    Return the seconds gained (positive) or lost (negative) by automating.

    Args:
        task_time_saved: Time saved each time the task runs
        task_repetitions: Number of times the task runs
        time_to_automate: One-time cost of automating, per person
        resources: Number of people spending `time_to_automate`

    Returns:
        Signed net profit in seconds, unrounded

    Example:
        >>> time_profit(
        ...     task_time_saved=Duration(value=5, unit="minutes"),
        ...     task_repetitions=90,
        ...     time_to_automate=Duration(value=45, unit="minutes"),
        ... )
        24300
    """
    value = seconds_from_duration(task_time_saved) * task_repetitions
    cost = seconds_from_duration(time_to_automate) * resources
    return value - cost


def verdict(profit: float) -> Verdict:
    """Classify a profit as worth automating, break-even, or not worth it."""
    if math.isnan(profit):
        raise ValueError("Cannot classify a NaN time profit")
    if profit > 0:
        return "automate"
    if profit == 0:
        return "break-even"
    return "dont-automate"


@dataclass(frozen=True, kw_only=True)
class ProfitReport:
    profit: float
    verdict: Verdict
    headline: str
    message: str


def report(profit: float) -> ProfitReport:
    """Build the recommendation shown to a user for a computed profit."""
    outcome = verdict(profit)
    if outcome == "automate":
        headline = "You can automate this task!"
        message = f"You can automate this task to save {describe(profit)}."
    elif outcome == "break-even":
        headline = "You can automate this task!"
        message = (
            "However, automating this task will not save any time, "
            "but it will not waste any time either."
        )
    else:
        headline = "You cannot automate this task!"
        message = (
            f"You cannot automate this task for {describe(-profit)}. "
            f"This is because you will not be able to save any time."
        )
    return ProfitReport(
        profit=profit, verdict=outcome, headline=headline, message=message
    )
