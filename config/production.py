import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ALERT_DISPLAY_LIMIT = int(os.getenv("ALERT_DISPLAY_LIMIT", "10"))

# Live attendance sessions kept in memory; the least recently used is dropped beyond this.
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "100"))

DEBUG = False
