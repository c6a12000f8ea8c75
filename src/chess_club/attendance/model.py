from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..students.model import Student


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one dated club meeting. At most one per session_date."""

    session_id: int
    session_date: date
    start_time: time
    end_time: time


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's presence in one session."""

    record_id: int
    student_id: int
    session_id: int
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    @property
    def checked_in(self) -> bool:
        return self.check_in_time is not None

    @property
    def checked_out(self) -> bool:
        return self.check_out_time is not None


@dataclass(frozen=True)
class AttendanceState:
    """Confirmed attendance state of a student for a session date.

    Built from the row the backend returned, never from what we intended to write.
    """

    student_id: int
    session_date: date
    record_id: Optional[int] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    @property
    def checked_in(self) -> bool:
        return self.check_in_time is not None

    @property
    def checked_out(self) -> bool:
        return self.check_out_time is not None

    @classmethod
    def from_record(cls, *, student_id: int, session_date: date, record: Optional[AttendanceRecord]) -> "AttendanceState":
        if record is None:
            return cls(student_id=student_id, session_date=session_date)
        return cls(
            student_id=student_id,
            session_date=session_date,
            record_id=record.record_id,
            check_in_time=record.check_in_time,
            check_out_time=record.check_out_time,
        )


@dataclass(frozen=True)
class RosterEntry:
    """Read-model: an active student joined with their record for the target session."""

    student: Student
    record: Optional[AttendanceRecord] = None

    @property
    def checked_in(self) -> bool:
        return self.record is not None and self.record.checked_in

    @property
    def checked_out(self) -> bool:
        return self.record is not None and self.record.checked_out


@dataclass(frozen=True)
class AttendanceStats:
    total_students: int
    present_today: int
    attendance_rate: int
