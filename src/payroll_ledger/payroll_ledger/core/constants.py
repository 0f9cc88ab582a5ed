"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

LEAVE_DAY_HOURS = 8.0
DEFAULT_ANNUAL_LEAVE_DAYS = 20
MAX_HOURS_PER_DAY = 24.0
HISTORY_DATE_FORMAT = "%d-%m-%Y"
