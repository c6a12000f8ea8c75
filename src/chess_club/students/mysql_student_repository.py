from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = "student_id, first_name, last_name, grade, teacher, active, created_at"


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        grade=int(r["grade"]),
        teacher=r["teacher"],
        active=bool(r.get("active", True)),
        created_at=r.get("created_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_active(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM students
                WHERE active=1
                ORDER BY grade ASC, last_name ASC
                """
            )
            return [_to_student(r) for r in fetchall(cur)]

    def list_all(self, *, grade: Optional[int] = None, search: Optional[str] = None) -> Sequence[Student]:
        clauses = ["1=1"]
        params: list[object] = []

        if grade is not None:
            clauses.append("grade=%s")
            params.append(int(grade))
        if search:
            pattern = f"%{search.lower()}%"
            clauses.append("(LOWER(first_name) LIKE %s OR LOWER(last_name) LIKE %s)")
            params.extend([pattern, pattern])

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM students
                WHERE {where}
                ORDER BY grade ASC, last_name ASC
                """,
                tuple(params),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def create(self, *, first_name: str, last_name: str, grade: int, teacher: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(first_name, last_name, grade, teacher, active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (first_name, last_name, int(grade), teacher),
            )
            return int(cur.lastrowid)

    def set_active(self, student_id: int, *, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE students SET active=%s WHERE student_id=%s",
                (1 if active else 0, int(student_id)),
            )
            return cur.rowcount > 0
