"""Utility constants for vaguetime.

Time unit constants represent durations in milliseconds.
A year is 365.25 days and a month is exactly a twelfth of a year.
"""

# Time unit constants (all values in milliseconds)
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000
MONTH = 2629800000  # YEAR / 12
YEAR = 31557600000  # 365.25 days
