from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence

from ..core.enums import AttendanceAction
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceSession, AttendanceState, AttendanceStats, RosterEntry
from .reconciler import AttendanceReconciler
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def compute_stats(entries: Sequence[RosterEntry]) -> AttendanceStats:
    """Stats cards for a roster view. Pure function, no I/O."""

    total = len(entries)
    present = sum(1 for e in entries if e.checked_in)
    # Half-up rounding, same as the dashboard always showed.
    rate = math.floor(present * 100 / total + 0.5) if total else 0
    return AttendanceStats(total_students=total, present_today=present, attendance_rate=rate)


def filter_roster(entries: Sequence[RosterEntry], query: str) -> list[RosterEntry]:
    q = (query or "").strip().lower()
    if not q:
        return list(entries)
    return [
        e
        for e in entries
        if q in e.student.first_name.lower() or q in e.student.last_name.lower() or q in e.student.teacher.lower()
    ]


@dataclass(frozen=True)
class RosterView:
    session_date: date
    session: AttendanceSession | None
    entries: list[RosterEntry]
    stats: AttendanceStats


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        reconciler: AttendanceReconciler | None = None,
    ):
        self._attendance = attendance
        self._students = students
        self._reconciler = reconciler or AttendanceReconciler(attendance)

    def roster_for(self, session_date: date, *, query: str = "") -> RosterView:
        """Active students joined with their record for session_date.

        Read-only: a missing session means nobody is checked in yet.
        Stats always cover the whole roster, not just the search hits.
        """

        students = self._students.list_active()
        session = self._attendance.find_session_by_date(session_date)

        by_student = {}
        if session is not None:
            by_student = {r.student_id: r for r in self._attendance.list_records_for_session(session.session_id)}

        entries = [RosterEntry(student=s, record=by_student.get(s.student_id)) for s in students]
        return RosterView(
            session_date=session_date,
            session=session,
            entries=filter_roster(entries, query),
            stats=compute_stats(entries),
        )

    def toggle(
        self,
        student_id: int,
        action: AttendanceAction,
        session_date: date,
        *,
        now: datetime | None = None,
    ) -> AttendanceState:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        if not student.active:
            raise ValidationError(f"{student.full_name} is not an active club member")
        return self._reconciler.toggle(student.student_id, action, session_date, now=now)

    def remove_record(self, student_id: int, session_date: date) -> None:
        """Delete a record entered by mistake. The session row stays."""

        session = self._attendance.find_session_by_date(session_date)
        if session is None:
            raise NotFoundError(f"No club session for {session_date.isoformat()}")
        record = self._attendance.find_record(student_id=student_id, session_id=session.session_id)
        if record is None:
            raise NotFoundError("No attendance record for this student")
        self._attendance.delete_record(record.record_id)
        logger.info("deleted attendance record %s (student %s, %s)", record.record_id, student_id, session_date.isoformat())
