"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Position title that entitles distance-based pay (case-sensitive).
DRIVER_POSITION = "Autofahrer"

# Rate per distance unit when neither an override nor a stored value exists.
DEFAULT_DISTANCE_RATE = 0.25

# Day-off pay: (b * 3 / 65) per day of delta.
DAY_OFF_RATE_NUMERATOR = 3
DAY_OFF_RATE_DENOMINATOR = 65

SALARY_DECIMALS = 2

# salaries.total_salary is DECIMAL(14, 2): magnitudes must stay below 10**12.
SALARY_LIMIT = 10**12

DEFAULT_QUERY_WORKERS = 4
