"""Utility constants for timeprofit.

Time unit constants represent durations in seconds.
Months are a flat 30 days and years are the mean Gregorian year, so
conversions are approximations rather than calendar-accurate.
"""

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365.2425

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 7 * DAY
MONTH = DAYS_PER_MONTH * DAY
YEAR = 31556952  # DAYS_PER_YEAR * DAY, kept exact
