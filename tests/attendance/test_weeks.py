from datetime import date, datetime

import pytest

from checkin_system.attendance.weeks import DEFAULT_EPOCH, week_date_range, week_number
from checkin_system.core.exceptions import ValidationError


def test_epoch_is_week_one():
    assert DEFAULT_EPOCH == date(2026, 2, 6)
    assert week_number(date(2026, 2, 6)) == 1
    assert week_number(date(2026, 2, 12)) == 1
    assert week_number(date(2026, 2, 13)) == 2


def test_dates_before_epoch_clamp_to_week_one():
    assert week_number(date(2026, 1, 1)) == 1
    assert week_number(date(2025, 6, 30)) == 1


def test_time_of_day_does_not_change_week():
    assert week_number(datetime(2026, 2, 12, 23, 59)) == 1
    assert week_number(datetime(2026, 2, 13, 0, 0)) == 2


def test_accepts_iso_strings_and_custom_epoch():
    assert week_number("2026-03-01", "2026-02-27") == 1
    assert week_number("2026-03-06", "2026-02-27") == 2


def test_week_date_range():
    week = week_date_range(3)

    assert week.start_date == date(2026, 2, 20)
    assert week.end_date == date(2026, 2, 26)
    assert week.to_dict() == {"weekNumber": 3, "startDate": "2026-02-20", "endDate": "2026-02-26"}


@pytest.mark.parametrize("n", [1, 2, 10, 52])
def test_range_contains_its_own_days(n):
    week = week_date_range(n)

    assert week.contains(week.start_date)
    assert week.contains(week.end_date)
    assert week_number(week.start_date) == n
    assert week_number(week.end_date) == n


@pytest.mark.parametrize("n", [0, -1])
def test_week_number_below_one_is_rejected(n):
    with pytest.raises(ValidationError):
        week_date_range(n)


@pytest.mark.parametrize("day", [date(2026, 2, 6), date(2026, 2, 10), date(2026, 3, 4), date(2026, 11, 1)])
def test_range_of_a_days_week_contains_that_day(day):
    assert week_date_range(week_number(day)).contains(day)
