import pytest

from chess_club.core.exceptions import NotFoundError, ValidationError
from chess_club.students.service import StudentService


def test_directory_groups_by_grade(students_repo):
    groups = StudentService(students_repo).directory()

    assert [g.grade for g in groups] == [2, 3]
    assert [s.last_name for s in groups[0].students] == ["Brown", "Smith"]
    # Directory shows inactive students too.
    assert [s.last_name for s in groups[1].students] == ["Davis", "Garcia"]


def test_directory_filters_by_grade_and_name(students_repo):
    svc = StudentService(students_repo)

    assert [g.grade for g in svc.directory(grade="3")] == [3]
    groups = svc.directory(search="liv")
    assert [s.first_name for g in groups for s in g.students] == ["Olivia"]


def test_directory_rejects_bad_grade(students_repo):
    with pytest.raises(ValidationError):
        StudentService(students_repo).directory(grade=9)


def test_grade_counts_cover_all_grades(students_repo):
    counts = StudentService.grade_counts(students_repo.list_all())
    assert counts == {2: 2, 3: 2, 4: 0, 5: 0, 6: 0}


def test_register_validates_and_creates(students_repo):
    svc = StudentService(students_repo)

    student_id = svc.register(first_name=" Ava ", last_name="Miller", grade="4", teacher="Mrs. Davis")

    s = students_repo.get_by_id(student_id)
    assert s.first_name == "Ava"
    assert s.grade == 4
    assert s.active is True


@pytest.mark.parametrize("grade", [1, 7, "x", None])
def test_register_rejects_grade_out_of_range(students_repo, grade):
    with pytest.raises(ValidationError):
        StudentService(students_repo).register(first_name="A", last_name="B", grade=grade, teacher="T")


def test_register_requires_teacher(students_repo):
    with pytest.raises(ValidationError):
        StudentService(students_repo).register(first_name="A", last_name="B", grade=3, teacher=" ")


def test_set_active(students_repo):
    svc = StudentService(students_repo)
    svc.set_active(1, active=False)
    assert students_repo.get_by_id(1).active is False

    with pytest.raises(NotFoundError):
        svc.set_active(42, active=True)
