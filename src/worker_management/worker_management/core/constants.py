"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OVERTIME_MULTIPLIER = 1.5
DEFAULT_SESSION_DAYS = 7

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

MONTH_KEY_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"
