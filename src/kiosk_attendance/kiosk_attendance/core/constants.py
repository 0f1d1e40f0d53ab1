"""Constants and defaults.

Note: Keep attendance policy values here so they can be overridden from
settings without touching the classification code.
"""

# Scans this many minutes before a session starts still count as on-time.
EARLY_ACCESS_MINUTES = 60

# The earliest tap of the day decides the verdict; later taps are ignored.
FIRST_SCAN_WINS = True

DEFAULT_GRACE_PERIOD_MINUTES = 0
DEFAULT_SCAN_LOG_LIMIT = 1000

WEEKDAY_TAGS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

ABSENT_TIME_IN = "--:--"
