from datetime import date, datetime

import pytest

from checkin_system.core.enums import DayType
from checkin_system.core.exceptions import ValidationError
from checkin_system.reports.export import weekly_report_csv


def _seed(attendance_repo, students_repo):
    ahmad, abdi, fatima = students_repo.list_active()[1], students_repo.list_active()[0], students_repo.list_active()[2]
    rows = [
        (fatima, DayType.WEEKEND, datetime(2026, 2, 7, 11, 50), False, None),
        (abdi, DayType.WEEKEND, datetime(2026, 2, 7, 12, 20), True, 20),
        (ahmad, DayType.WEEKDAY, datetime(2026, 2, 9, 17, 40), False, None),
        (fatima, DayType.WEEKDAY, datetime(2026, 2, 10, 18, 0), True, 30),
        (ahmad, DayType.WEEKDAY, datetime(2026, 2, 16, 17, 50), True, 20),
    ]
    for s, day_type, ts, late, late_minutes in rows:
        attendance_repo.create_checkin(
            student_id=s.student_id,
            student_name=s.name,
            class_type=day_type,
            work_date=ts.date(),
            check_in_time=ts,
            week_number=1 if ts.day < 13 else 2,
            is_late=late,
            late_minutes=late_minutes,
        )


def test_weekly_report_aggregates_per_student(report_service, attendance_repo, students_repo):
    _seed(attendance_repo, students_repo)
    report = report_service.weekly_report(1)

    assert (report.start_date, report.end_date) == (date(2026, 2, 6), date(2026, 2, 12))
    assert report.total_sessions == 4
    assert [s["student_name"] for s in report.summary] == ["Abdirahman Osman", "Ahmad Noori", "Fatima Hassan"]

    fatima = report.summary[2]
    assert fatima["class_type"] == "both"
    assert fatima["total_classes"] == 2
    assert fatima["times_late"] == 1
    assert fatima["total_late_minutes"] == 30
    assert (fatima["weekday_classes"], fatima["weekend_classes"]) == (1, 1)

    assert len(report.weekday_rows) == 2
    assert report.weekend_rows[1]["status"] == "Late"
    assert report.weekend_rows[0]["check_out"] == "Not checked out"


def test_weekly_report_empty_week(report_service):
    report = report_service.weekly_report(5)

    assert report.total_sessions == 0
    assert report.to_dict()["startDate"] == "2026-03-06"


def test_date_range_report(report_service, attendance_repo, students_repo):
    _seed(attendance_repo, students_repo)
    report = report_service.date_range_report(start=date(2026, 2, 9), end=date(2026, 2, 16))

    assert report.total_sessions == 3
    assert report.weekend_rows == []


def test_date_range_report_rejects_inverted_range(report_service):
    with pytest.raises(ValidationError):
        report_service.date_range_report(start=date(2026, 2, 10), end=date(2026, 2, 9))


def test_student_report(report_service, attendance_repo, students_repo):
    _seed(attendance_repo, students_repo)
    report = report_service.student_report(student_name="ahmad")

    assert report.student_name == "Ahmad Noori"
    assert report.summary["totalCheckins"] == 2
    assert report.summary["lateCheckins"] == 1
    assert report.summary["averageLateMinutes"] == 20
    assert report.weekly_breakdown == {1: 1, 2: 1}
    assert report.records[0]["date"] == "2026-02-16"


def test_student_report_without_records(report_service):
    assert report_service.student_report(student_id=999) is None
    with pytest.raises(ValidationError):
        report_service.student_report()


def test_weekly_report_csv_sections(report_service, attendance_repo, students_repo):
    _seed(attendance_repo, students_repo)
    text = weekly_report_csv(report_service.weekly_report(1)).decode("utf-8-sig")
    lines = text.splitlines()

    assert lines[0] == "Weekly Attendance Report - Week 1: 2026-02-06 to 2026-02-12"
    assert lines[1].startswith("student_name,class_type,total_classes")
    assert "Weekday Attendance" in lines
    assert "Weekend Attendance" in lines
    assert any(line.startswith("2026-02-07,Abdirahman Osman,12:20") for line in lines)
