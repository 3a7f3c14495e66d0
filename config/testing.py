SECRET_KEY = "test-secret"

LOG_LEVEL = "WARNING"

ALERT_DISPLAY_LIMIT = 10

MAX_SESSIONS = 100

DEBUG = False
TESTING = True
