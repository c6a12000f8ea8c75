from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import require_grade, require_non_empty
from ..core.constants import GRADES
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeGroup:
    grade: int
    students: list[Student]


class StudentService:
    """Use cases around the club roster (directory, registration, active flag)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def directory(self, *, grade: Optional[int] = None, search: str = "") -> list[GradeGroup]:
        if grade is not None:
            grade = require_grade(grade)
        search = (search or "").strip()

        rows = self._students.list_all(grade=grade, search=search or None)

        groups: dict[int, list[Student]] = {}
        for s in rows:
            groups.setdefault(s.grade, []).append(s)
        return [GradeGroup(grade=g, students=groups[g]) for g in sorted(groups)]

    @staticmethod
    def grade_counts(students: Sequence[Student]) -> dict[int, int]:
        counts = {g: 0 for g in GRADES}
        for s in students:
            if s.grade in counts:
                counts[s.grade] += 1
        return counts

    def register(self, *, first_name: str, last_name: str, grade, teacher: str) -> int:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        teacher = require_non_empty(teacher, "Teacher")
        grade = require_grade(grade)

        student_id = self._students.create(first_name=first_name, last_name=last_name, grade=grade, teacher=teacher)
        logger.info("registered student %s %s (id=%s, grade=%s)", first_name, last_name, student_id, grade)
        return student_id

    def set_active(self, student_id: int, *, active: bool) -> None:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")
        self._students.set_active(student_id, active=active)
        logger.info("student %s active=%s", student_id, active)
