"""User-facing wording for eligibility results.

Kept apart from the rules: these functions only read the reason category and
numeric parameters of an ``EvaluationResult``.
"""
from __future__ import annotations

from ..common.time_format import format_clock_12h, format_duration, format_late_message
from ..core.enums import ClassType, DayType, RejectionReason
from ..schedules.model import ScheduleEntry, ScheduleTable
from .eligibility import EvaluationResult

DAY_RANGES = {
    DayType.WEEKEND: "Saturday-Sunday",
    DayType.WEEKDAY: "Monday-Friday",
}


def describe_hours(entry: ScheduleEntry) -> str:
    return f"{format_clock_12h(entry.start_time)} - {format_clock_12h(entry.end_time)}"


def describe_class_type(class_type: ClassType, schedules: ScheduleTable) -> str:
    """E.g. "weekday classes (Monday-Friday, 5:30 PM - 7:30 PM)"."""
    if class_type == ClassType.BOTH:
        parts = [f"{DAY_RANGES[d]}, {describe_hours(schedules.for_day_type(d))}" for d in DayType]
        return f"weekend and weekday classes ({'; '.join(parts)})"

    day_type = DayType(class_type.value)
    entry = schedules.for_day_type(day_type)
    return f"{class_type.value} classes ({DAY_RANGES[day_type]}, {describe_hours(entry)})"


def describe_rejection(result: EvaluationResult, schedules: ScheduleTable) -> str:
    entry = schedules.for_day_type(result.day_type)

    if result.reason == RejectionReason.WRONG_DAY:
        return (
            f"You are registered for {describe_class_type(result.class_type, schedules)}. "
            f"Today is {result.local_time.strftime('%A')}, a {result.day_type.value} class day."
        )

    if result.reason == RejectionReason.TOO_EARLY:
        starts = f"Class starts at {format_clock_12h(entry.start_time)}."
        if entry.early_login_minutes:
            starts = (
                f"Check-in opens {format_duration(entry.early_login_minutes)} before class, "
                f"which starts at {format_clock_12h(entry.start_time)}."
            )
        return f"{starts} Please try again in {format_duration(result.minutes_until_open or 0)}."

    if result.reason == RejectionReason.CLASS_ENDED:
        return (
            f"Class ended at {format_clock_12h(entry.end_time)}. "
            "Check-in is not allowed after class end time."
        )

    return "Check-in is not allowed right now."


def describe_admission(student_name: str, result: EvaluationResult) -> str:
    if result.is_late:
        return f"{student_name} checked in {format_late_message(result.minutes_late or 0)}"
    return f"{student_name} checked in on time"
