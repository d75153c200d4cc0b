"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_SYSTEM_START_DATE = "2026-02-06"
DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_EARLY_LOGIN_MINUTES = 60
SEARCH_RESULT_LIMIT = 10
DEFAULT_RECENT_LIMIT = 50
DAYS_PER_WEEK = 7
