"""Human-readable durations and clock times.

Display helpers only: callers pass the numbers computed by the eligibility
rules and get back strings for flash/JSON messages.
"""
from __future__ import annotations

from datetime import time


def _unit(count: int, name: str) -> str:
    return f"{count} {name}{'' if count == 1 else 's'}"


def format_duration(total_minutes: int) -> str:
    """70 -> "1 hour and 10 minutes", 60 -> "1 hour", 45 -> "45 minutes"."""
    if total_minutes == 0:
        return "0 minutes"

    hours, minutes = divmod(total_minutes, 60)
    if hours == 0:
        return _unit(minutes, "minute")
    if minutes == 0:
        return _unit(hours, "hour")
    return f"{_unit(hours, 'hour')} and {_unit(minutes, 'minute')}"


def format_late_message(late_minutes: int) -> str:
    if late_minutes < 60:
        return f"{_unit(late_minutes, 'minute')} late"

    hours, minutes = divmod(late_minutes, 60)
    if minutes == 0:
        return f"{_unit(hours, 'hour')} late"
    return f"{_unit(hours, 'hour')} {_unit(minutes, 'minute')} late"


def format_clock_12h(value: time) -> str:
    """time(17, 30) -> "5:30 PM"."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"
