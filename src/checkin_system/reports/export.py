from __future__ import annotations

import csv
import io

from .service import WeeklyReport

SUMMARY_FIELDS = [
    "student_name",
    "class_type",
    "total_classes",
    "times_late",
    "total_late_minutes",
    "weekday_classes",
    "weekend_classes",
]

ATTENDANCE_FIELDS = ["date", "student_name", "check_in", "check_out", "status", "late_minutes", "week_number"]


def weekly_report_csv(report: WeeklyReport) -> bytes:
    """Render a weekly report as one CSV with summary, weekday and weekend sections."""

    out = io.StringIO()
    out.write(
        f"Weekly Attendance Report - Week {report.week_number}: "
        f"{report.start_date:%Y-%m-%d} to {report.end_date:%Y-%m-%d}\n"
    )

    writer = csv.DictWriter(out, fieldnames=SUMMARY_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for row in report.summary:
        writer.writerow(row)

    for title, rows in (("Weekday Attendance", report.weekday_rows), ("Weekend Attendance", report.weekend_rows)):
        out.write(f"\n{title}\n")
        writer = csv.DictWriter(out, fieldnames=ATTENDANCE_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

    return out.getvalue().encode("utf-8-sig")
