from datetime import datetime

import pytest

from checkin_system.core.enums import DayType, RejectionReason
from checkin_system.core.exceptions import CheckInRejectedError, NotFoundError, ValidationError


def test_checkin_on_time_stores_local_time_and_week(attendance_service, attendance_repo):
    outcome = attendance_service.check_in("Ahmad Noori")

    assert outcome.status == "success"
    assert outcome.message == "Ahmad Noori checked in on time"
    rec = attendance_repo.get_for_student_and_date(outcome.student.student_id, datetime(2026, 2, 16).date())
    assert rec.check_in_time == datetime(2026, 2, 16, 17, 0)
    assert rec.week_number == 2
    assert rec.class_type == DayType.WEEKDAY
    assert rec.is_late is False
    assert rec.late_minutes is None


def test_checkin_late(attendance_service, at):
    outcome = attendance_service.check_in("ahmad", now=at(2026, 2, 16, 17, 50))

    assert outcome.message == "Ahmad Noori checked in 20 minutes late"
    assert outcome.record.is_late is True
    assert outcome.record.late_minutes == 20
    assert outcome.to_dict()["data"]["evaluation"]["minutesLate"] == 20


def test_second_checkin_same_day_is_a_warning(attendance_service, attendance_repo, at):
    attendance_service.check_in("Ahmad Noori", now=at(2026, 2, 16, 17, 0))
    outcome = attendance_service.check_in("Ahmad Noori", now=at(2026, 2, 16, 18, 0))

    assert outcome.status == "warning"
    assert "already checked in today at 5:00 PM" in outcome.message
    assert len(attendance_repo.list_recent(10)) == 1


def test_rejected_checkin_raises_with_evaluation(attendance_service, attendance_repo, at):
    with pytest.raises(CheckInRejectedError) as exc:
        attendance_service.check_in("Ahmad Noori", now=at(2026, 2, 14, 17, 0))

    assert exc.value.evaluation.reason == RejectionReason.WRONG_DAY
    assert "Today is Saturday" in str(exc.value)
    assert attendance_repo.list_recent(10) == []


def test_both_student_session_is_tagged_with_day_type(attendance_service, at):
    outcome = attendance_service.check_in("Fatima Hassan", now=at(2026, 2, 14, 11, 45))
    assert outcome.record.class_type == DayType.WEEKEND


def test_unknown_student(attendance_service):
    with pytest.raises(NotFoundError):
        attendance_service.check_in("Nobody Here")


def test_checkout_requires_checkin(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.check_out("Ahmad Noori")


def test_checkout_flow(attendance_service, at):
    attendance_service.check_in("Ahmad Noori", now=at(2026, 2, 16, 17, 0))
    first = attendance_service.check_out("Ahmad Noori", now=at(2026, 2, 16, 19, 30))
    second = attendance_service.check_out("Ahmad Noori", now=at(2026, 2, 16, 19, 40))

    assert first.status == "success"
    assert first.record.check_out_time == datetime(2026, 2, 16, 19, 30)
    assert second.status == "warning"
    assert "already checked out today at 7:30 PM" in second.message


@pytest.mark.parametrize("action", ["checkin", "IN"])
def test_submit_accepts_action_aliases(attendance_service, action):
    assert attendance_service.submit("Ahmad Noori", action).status == "success"


def test_submit_rejects_unknown_action(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.submit("Ahmad Noori", "teleport")
