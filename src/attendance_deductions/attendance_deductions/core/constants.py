"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OFFICIAL_CHECK_IN_TIME = "08:30 AM"
DAYS_PER_MONTH = 30

DEDUCTION_SETTINGS_KEY = "deduction_settings"
DEDUCTION_SETTINGS_CATEGORY = "system"

DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_FIXED_DEDUCTION_AMOUNT = 50
DEFAULT_PERCENTAGE_DEDUCTION = 2
DEFAULT_APPLY_AFTER_DAYS = 1

# (min minutes, max minutes, amount)
DEFAULT_SCALED_TIERS = (
    (15, 30, 30),
    (31, 60, 60),
    (61, 120, 100),
    (121, 999, 150),
)
