"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Assumed working days in a month when an employee has no attendance records.
DEFAULT_WORKING_DAYS = 22

MONTH_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"

MONEY_PLACES = "0.01"

DEFAULT_LIST_LIMIT = 500
