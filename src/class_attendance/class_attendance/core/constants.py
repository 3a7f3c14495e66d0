"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NOTIFICATION_LOG_LIMIT = 5
DEFAULT_ALERT_DISPLAY_LIMIT = 10

ABSENCE_ATTENTION_THRESHOLD = 3
ABSENCE_CRITICAL_THRESHOLD = 5

CONNECTION_MINUTES_MIN = 10
CONNECTION_MINUTES_MAX = 99

UNKNOWN_STUDENT_NAME = "Unknown student"
