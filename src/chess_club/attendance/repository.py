from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceSession

# Sentinel for update_record: "leave this column alone" (None means "set NULL").
UNCHANGED = object()


class AttendanceRepository(Protocol):
    def find_session_by_date(self, session_date: date) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def create_session(self, *, session_date: date, start_time: time, end_time: time) -> AttendanceSession:
        """Insert the session for session_date, or return the existing one.

        Must converge on a single row when two callers race.
        """

        raise NotImplementedError

    def find_record(self, *, student_id: int, session_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_record(
        self,
        *,
        student_id: int,
        session_id: int,
        check_in_time: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Insert the (student, session) record, or return the existing one.

        An existing check_in_time is kept; a missing one is filled in.
        """

        raise NotImplementedError

    def update_record(self, record_id: int, *, check_in_time=UNCHANGED, check_out_time=UNCHANGED) -> AttendanceRecord:
        raise NotImplementedError

    def delete_record(self, record_id: int) -> None:
        raise NotImplementedError

    def list_records_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
