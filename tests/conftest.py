from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from chess_club.attendance.model import AttendanceRecord, AttendanceSession
from chess_club.attendance.repository import UNCHANGED
from chess_club.core.enums import MatchResult
from chess_club.matches.model import Match
from chess_club.students.model import Student
from chess_club.users.model import Coach


class InMemoryStudents:
    def __init__(self, students: Optional[list[Student]] = None):
        self._by_id: dict[int, Student] = {s.student_id: s for s in (students or [])}
        self._id = max(self._by_id, default=0)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._by_id.get(int(student_id))

    def list_active(self):
        return sorted((s for s in self._by_id.values() if s.active), key=lambda s: (s.grade, s.last_name))

    def list_all(self, *, grade=None, search=None):
        items = list(self._by_id.values())
        if grade is not None:
            items = [s for s in items if s.grade == int(grade)]
        if search:
            q = search.lower()
            items = [s for s in items if q in s.first_name.lower() or q in s.last_name.lower()]
        return sorted(items, key=lambda s: (s.grade, s.last_name))

    def create(self, *, first_name: str, last_name: str, grade: int, teacher: str) -> int:
        self._id += 1
        self._by_id[self._id] = Student(
            student_id=self._id, first_name=first_name, last_name=last_name, grade=grade, teacher=teacher
        )
        return self._id

    def set_active(self, student_id: int, *, active: bool) -> bool:
        s = self._by_id.get(int(student_id))
        if not s:
            return False
        self._by_id[s.student_id] = replace(s, active=active)
        return True


class InMemoryAttendance:
    """Attendance store with the same upsert semantics as the MySQL repository."""

    def __init__(self):
        self.sessions: dict[date, AttendanceSession] = {}
        self.records: dict[int, AttendanceRecord] = {}
        self.writes: list[str] = []
        self._session_id = 0
        self._record_id = 0

    def find_session_by_date(self, session_date: date) -> Optional[AttendanceSession]:
        return self.sessions.get(session_date)

    def create_session(self, *, session_date: date, start_time: time, end_time: time) -> AttendanceSession:
        self.writes.append("create_session")
        if session_date not in self.sessions:
            self._session_id += 1
            self.sessions[session_date] = AttendanceSession(
                session_id=self._session_id, session_date=session_date, start_time=start_time, end_time=end_time
            )
        return self.sessions[session_date]

    def find_record(self, *, student_id: int, session_id: int) -> Optional[AttendanceRecord]:
        for r in self.records.values():
            if r.student_id == student_id and r.session_id == session_id:
                return r
        return None

    def create_record(self, *, student_id: int, session_id: int, check_in_time=None) -> AttendanceRecord:
        self.writes.append("create_record")
        existing = self.find_record(student_id=student_id, session_id=session_id)
        if existing:
            if existing.check_in_time is None:
                existing = replace(existing, check_in_time=check_in_time)
                self.records[existing.record_id] = existing
            return existing
        self._record_id += 1
        rec = AttendanceRecord(
            record_id=self._record_id, student_id=student_id, session_id=session_id, check_in_time=check_in_time
        )
        self.records[rec.record_id] = rec
        return rec

    def update_record(self, record_id: int, *, check_in_time=UNCHANGED, check_out_time=UNCHANGED) -> AttendanceRecord:
        self.writes.append("update_record")
        rec = self.records[record_id]
        if check_in_time is not UNCHANGED:
            rec = replace(rec, check_in_time=check_in_time)
        if check_out_time is not UNCHANGED:
            rec = replace(rec, check_out_time=check_out_time)
        self.records[record_id] = rec
        return rec

    def delete_record(self, record_id: int) -> None:
        self.writes.append("delete_record")
        self.records.pop(record_id, None)

    def list_records_for_session(self, session_id: int):
        return [r for r in self.records.values() if r.session_id == session_id]


class InMemoryMatches:
    def __init__(self):
        self.matches: list[Match] = []

    def list_recent(self, limit: int):
        return list(reversed(self.matches))[:limit]

    def list_all(self):
        return list(self.matches)

    def create(self, *, white_student_id: int, black_student_id: int, result: MatchResult, played_on: date) -> int:
        match_id = len(self.matches) + 1
        self.matches.append(
            Match(
                match_id=match_id,
                white_student_id=white_student_id,
                black_student_id=black_student_id,
                result=result,
                played_on=played_on,
                created_at=datetime(2026, 10, 21, 16, 0),
            )
        )
        return match_id


class InMemoryCoaches:
    def __init__(self, coaches: Optional[list[Coach]] = None):
        self._by_username = {c.username: c for c in (coaches or [])}

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        return next((c for c in self._by_username.values() if c.coach_id == coach_id), None)

    def get_by_username(self, username: str) -> Optional[Coach]:
        return self._by_username.get(username)


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday, during club time.
    return datetime(2026, 10, 21, 15, 35, 0)


@pytest.fixture
def club_day(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents(
        [
            Student(student_id=1, first_name="Emma", last_name="Smith", grade=2, teacher="Ms. Johnson"),
            Student(student_id=2, first_name="Liam", last_name="Brown", grade=2, teacher="Ms. Johnson"),
            Student(student_id=3, first_name="Olivia", last_name="Davis", grade=3, teacher="Mr. Wilson"),
            Student(student_id=4, first_name="Noah", last_name="Garcia", grade=3, teacher="Mr. Wilson", active=False),
        ]
    )


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def matches_repo() -> InMemoryMatches:
    return InMemoryMatches()


@pytest.fixture
def coaches_repo() -> InMemoryCoaches:
    return InMemoryCoaches(
        [Coach(coach_id=1, full_name="Coach Carter", username="coach", password_hash=generate_password_hash("secret"))]
    )
