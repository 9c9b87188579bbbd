"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

DEFAULT_EXPECTED_HOURS_PER_DAY = 8
DEFAULT_ENTRY_TIME = "08:00"
DEFAULT_EXIT_TIME = "17:00"
DEFAULT_BREAK_MINUTES = 60

MIN_REPORT_YEAR = 1900
MAX_REPORT_YEAR = 2100
# a leap year, the longest period summary
MAX_REPORT_SPAN_DAYS = 366
