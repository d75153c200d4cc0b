"""Turn settings-module values into a validated ``CheckInSettings``.

This is the only place that understands the raw configuration shape; a
malformed schedule aborts startup with ``ConfigurationError``.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..core.constants import (
    DEFAULT_EARLY_LOGIN_MINUTES,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_SYSTEM_START_DATE,
    DEFAULT_TIMEZONE,
)
from ..core.enums import DayType
from ..core.exceptions import ConfigurationError
from .model import CheckInSettings, ScheduleEntry, ScheduleTable

DEFAULT_CLASS_SCHEDULES: dict[str, dict[str, Any]] = {
    DayType.WEEKEND.value: {
        "start": "12:00",
        "end": "13:30",
        "late_threshold_minutes": DEFAULT_LATE_THRESHOLD_MINUTES,
        "early_login_minutes": DEFAULT_EARLY_LOGIN_MINUTES,
    },
    DayType.WEEKDAY.value: {
        "start": "17:30",
        "end": "19:30",
        "late_threshold_minutes": DEFAULT_LATE_THRESHOLD_MINUTES,
        "early_login_minutes": DEFAULT_EARLY_LOGIN_MINUTES,
    },
}


def _non_negative_int(raw: Any, *, field: str, day_type: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{day_type}.{field} must be an integer, got {raw!r}")
    if value < 0:
        raise ConfigurationError(f"{day_type}.{field} must be >= 0, got {value}")
    return value


def build_schedule_entry(day_type: str, raw: Mapping[str, Any]) -> ScheduleEntry:
    try:
        start = parse_hhmm(str(raw["start"]))
        end = parse_hhmm(str(raw["end"]))
    except KeyError as e:
        raise ConfigurationError(f"{day_type} schedule is missing {e.args[0]!r}")
    except ValueError:
        raise ConfigurationError(f"{day_type} schedule times must be HH:MM (24-hour)")

    if start >= end:
        raise ConfigurationError(f"{day_type} schedule must start before it ends ({raw['start']} >= {raw['end']})")

    return ScheduleEntry(
        start_time=start,
        end_time=end,
        late_threshold_minutes=_non_negative_int(
            raw.get("late_threshold_minutes", DEFAULT_LATE_THRESHOLD_MINUTES),
            field="late_threshold_minutes",
            day_type=day_type,
        ),
        early_login_minutes=_non_negative_int(
            raw.get("early_login_minutes", DEFAULT_EARLY_LOGIN_MINUTES),
            field="early_login_minutes",
            day_type=day_type,
        ),
    )


def build_schedule_table(raw: Mapping[str, Mapping[str, Any]] | None = None) -> ScheduleTable:
    raw = raw or DEFAULT_CLASS_SCHEDULES
    entries = {}
    for day_type in DayType:
        if day_type.value not in raw:
            raise ConfigurationError(f"Missing schedule for {day_type.value}")
        entries[day_type.value] = build_schedule_entry(day_type.value, raw[day_type.value])
    return ScheduleTable(weekend=entries["weekend"], weekday=entries["weekday"])


def load_checkin_settings(settings: Any) -> CheckInSettings:
    """Read CLASS_SCHEDULES / ORG_TIMEZONE / SYSTEM_START_DATE from a settings module."""

    tz_name = getattr(settings, "ORG_TIMEZONE", DEFAULT_TIMEZONE) or DEFAULT_TIMEZONE
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigurationError(f"Unknown time zone: {tz_name!r}")

    start_s = getattr(settings, "SYSTEM_START_DATE", DEFAULT_SYSTEM_START_DATE) or DEFAULT_SYSTEM_START_DATE
    try:
        epoch: date = parse_iso_date(start_s)
    except ValueError:
        raise ConfigurationError(f"SYSTEM_START_DATE must be YYYY-MM-DD, got {start_s!r}")

    return CheckInSettings(
        schedules=build_schedule_table(getattr(settings, "CLASS_SCHEDULES", None)),
        tz=tz,
        epoch_date=epoch,
    )
