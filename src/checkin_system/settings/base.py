"""Settings shared by every environment.

Class schedules come from env vars so a deployment can move class times
without a code change; ``schedules.loader`` validates them at startup.
"""
import os

from ..core.constants import (
    DEFAULT_EARLY_LOGIN_MINUTES,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_SYSTEM_START_DATE,
    DEFAULT_TIMEZONE,
)

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "checkin_db"),
}

ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

ORG_TIMEZONE = os.getenv("ORG_TIMEZONE", DEFAULT_TIMEZONE)
SYSTEM_START_DATE = os.getenv("SYSTEM_START_DATE", DEFAULT_SYSTEM_START_DATE)

_LATE = os.getenv("LATE_THRESHOLD_MINUTES", str(DEFAULT_LATE_THRESHOLD_MINUTES))
_EARLY = os.getenv("EARLY_LOGIN_MINUTES", str(DEFAULT_EARLY_LOGIN_MINUTES))

CLASS_SCHEDULES = {
    "weekend": {
        "start": os.getenv("WEEKEND_START", "12:00"),
        "end": os.getenv("WEEKEND_END", "13:30"),
        "late_threshold_minutes": _LATE,
        "early_login_minutes": _EARLY,
    },
    "weekday": {
        "start": os.getenv("WEEKDAY_START", "17:30"),
        "end": os.getenv("WEEKDAY_END", "19:30"),
        "late_threshold_minutes": _LATE,
        "early_login_minutes": _EARLY,
    },
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
