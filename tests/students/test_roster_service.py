import pytest

from checkin_system.core.enums import ClassType
from checkin_system.core.exceptions import ConflictError, NotFoundError, ValidationError
from checkin_system.students.roster_parser import ParsedStudent
from checkin_system.students.service import matches_search


@pytest.mark.parametrize(
    "name, term, expected",
    [
        ("Ahmad Noori", "ah", True),
        ("Abdirahman Osman", "ah", False),
        ("Ahmad Noori", "noori", False),
        ("Ahmad Noori", "ahmad n", True),
        ("Ahmad Noori", "ahmad x", False),
    ],
)
def test_matches_search(name, term, expected):
    assert matches_search(name, term) is expected


def test_search_is_case_insensitive_and_limited(roster_service):
    assert [s.name for s in roster_service.search("AH")] == ["Ahmad Noori"]
    assert len(roster_service.search("a", limit=1)) == 1


def test_find_for_checkin_unknown_name(roster_service):
    with pytest.raises(NotFoundError) as exc:
        roster_service.find_for_checkin("Zed")
    assert 'Student "Zed" not found' in str(exc.value)


def test_add_student(roster_service, students_repo):
    student = roster_service.add_student(first_name=" Yusuf ", last_name="Ali", class_type="Weekday")

    assert student.name == "Yusuf Ali"
    assert student.class_type == ClassType.WEEKDAY
    assert students_repo.get_by_id(student.student_id).name == "Yusuf Ali"


def test_add_student_rejects_duplicate_across_class_types(roster_service):
    with pytest.raises(ConflictError) as exc:
        roster_service.add_student(first_name="ahmad", last_name="noori", class_type="weekend")

    assert 'Student "Ahmad Noori" already exists in Weekday class' in str(exc.value)


@pytest.mark.parametrize(
    "first, last, class_type",
    [("", "Ali", "weekday"), ("Yusuf", " ", "weekday"), ("Yusuf", "Ali", "monthly")],
)
def test_add_student_validation(roster_service, first, last, class_type):
    with pytest.raises(ValidationError):
        roster_service.add_student(first_name=first, last_name=last, class_type=class_type)


def test_delete_student(roster_service):
    ahmad = roster_service.search("ahmad")[0]
    roster_service.delete_student(ahmad.student_id)

    assert roster_service.search("ahmad") == []
    with pytest.raises(NotFoundError):
        roster_service.delete_student(ahmad.student_id)


def test_bulk_import_skips_existing_and_in_file_duplicates(roster_service):
    summary = roster_service.bulk_import(
        [
            ParsedStudent("Yusuf Ali", ClassType.WEEKDAY),
            ParsedStudent("ahmad noori", ClassType.WEEKEND),
            ParsedStudent("Yusuf Ali", ClassType.WEEKEND),
            ParsedStudent("Maryam Said", ClassType.BOTH),
        ]
    )

    assert (summary.success, summary.skipped, summary.failed) == (2, 2, 0)
    assert summary.errors == [
        'Skipped "ahmad noori": Already exists in the system',
        'Skipped "Yusuf Ali": Duplicate in upload file',
    ]
    assert {s.name for s in roster_service.list_active()} >= {"Yusuf Ali", "Maryam Said"}
