"""
Shared constants
"""

# Invalid data
MISSING_DATA = -999

# Sentinel used for absent weather fields
NONE_STR = "none"

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

# Default number of days summarized when the caller gives none
DEFAULT_NUM_DAYS = 7

# Local wall-clock hours that anchor the forecast periods
PERIOD_ANCHOR_HOURS = {"day": 6, "night": 18}

# Summarization modes
SUMMARY_MODES = {
    "12hourly": 12,
    "24hourly": 24,
}
