from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DAYS_PER_WEEK, DEFAULT_SYSTEM_START_DATE
from ..core.exceptions import ValidationError

DEFAULT_EPOCH = parse_iso_date(DEFAULT_SYSTEM_START_DATE)


@dataclass(frozen=True)
class WeekRange:
    week_number: int
    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        return {
            "weekNumber": self.week_number,
            "startDate": self.start_date.strftime("%Y-%m-%d"),
            "endDate": self.end_date.strftime("%Y-%m-%d"),
        }


def _civil_date(value: date | datetime | str) -> date:
    if isinstance(value, str):
        return parse_iso_date(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def week_number(day: date | datetime | str, epoch_date: date | str = DEFAULT_EPOCH) -> int:
    """Week index counted from ``epoch_date`` (week 1 starts on the epoch).

    Datetimes are truncated to their own civil date, so pass a local time.
    Dates before the epoch are all week 1.
    """
    diff_days = (_civil_date(day) - _civil_date(epoch_date)).days
    number = diff_days // DAYS_PER_WEEK + 1
    return number if number > 0 else 1


def week_date_range(number: int, epoch_date: date | str = DEFAULT_EPOCH) -> WeekRange:
    if int(number) < 1:
        raise ValidationError("Invalid week number")

    start = _civil_date(epoch_date) + timedelta(days=DAYS_PER_WEEK * (int(number) - 1))
    return WeekRange(week_number=int(number), start_date=start, end_date=start + timedelta(days=DAYS_PER_WEEK - 1))
