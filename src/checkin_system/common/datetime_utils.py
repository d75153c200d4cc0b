from __future__ import annotations

from datetime import date, datetime, time, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse a 24-hour HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def minutes_since_midnight(value: time | datetime) -> int:
    return value.hour * 60 + value.minute


def now_utc() -> datetime:
    """Current instant.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
