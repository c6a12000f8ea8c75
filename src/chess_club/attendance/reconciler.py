from __future__ import annotations

import logging
from datetime import date, datetime, time

from ..core.constants import DEFAULT_SESSION_END, DEFAULT_SESSION_START
from ..core.enums import AttendanceAction
from ..core.exceptions import InvariantViolationError, NotFoundError
from .model import AttendanceSession, AttendanceState
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceReconciler:
    """Turns a check-in/check-out button press into the minimal reads/writes.

    Every call runs strictly in order: session lookup, [session create],
    record lookup, [record create/update]. Results are built from the rows
    the repository hands back after the write.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        session_start: time = DEFAULT_SESSION_START,
        session_end: time = DEFAULT_SESSION_END,
    ):
        self._attendance = attendance
        self._session_start = session_start
        self._session_end = session_end

    def ensure_session(self, session_date: date) -> AttendanceSession:
        session = self._attendance.find_session_by_date(session_date)
        if session:
            return session

        session = self._attendance.create_session(
            session_date=session_date,
            start_time=self._session_start,
            end_time=self._session_end,
        )
        logger.info("created attendance session %s for %s", session.session_id, session_date.isoformat())
        return session

    def set_check_in(
        self,
        student_id: int,
        session_date: date,
        desired: bool,
        *,
        now: datetime | None = None,
    ) -> AttendanceState:
        now = now or datetime.now()
        session = self.ensure_session(session_date)
        record = self._attendance.find_record(student_id=student_id, session_id=session.session_id)

        if desired:
            if record is None:
                record = self._attendance.create_record(
                    student_id=student_id,
                    session_id=session.session_id,
                    check_in_time=now,
                )
                logger.info("student %s checked in for %s", student_id, session_date.isoformat())
            elif not record.checked_in:
                record = self._attendance.update_record(record.record_id, check_in_time=now)
                logger.info("student %s checked in for %s", student_id, session_date.isoformat())
        elif record is not None and record.checked_in:
            # check_out_time stays as history; "Out" is refused until checked in again.
            record = self._attendance.update_record(record.record_id, check_in_time=None)
            logger.info("student %s check-in cleared for %s", student_id, session_date.isoformat())

        return AttendanceState.from_record(student_id=student_id, session_date=session_date, record=record)

    def set_check_out(
        self,
        student_id: int,
        session_date: date,
        desired: bool,
        *,
        now: datetime | None = None,
    ) -> AttendanceState:
        now = now or datetime.now()
        session = self._attendance.find_session_by_date(session_date)
        if session is None:
            raise NotFoundError(f"No club session for {session_date.isoformat()}")

        record = self._attendance.find_record(student_id=student_id, session_id=session.session_id)
        if record is None:
            raise NotFoundError("Student was never checked in for this session")

        if desired:
            if not record.checked_in:
                raise InvariantViolationError("Cannot check out a student who is not checked in")
            if not record.checked_out:
                record = self._attendance.update_record(record.record_id, check_out_time=now)
                logger.info("student %s checked out for %s", student_id, session_date.isoformat())
        elif record.checked_out:
            record = self._attendance.update_record(record.record_id, check_out_time=None)
            logger.info("student %s check-out cleared for %s", student_id, session_date.isoformat())

        return AttendanceState.from_record(student_id=student_id, session_date=session_date, record=record)

    def current_state(self, student_id: int, session_date: date) -> AttendanceState:
        session = self._attendance.find_session_by_date(session_date)
        record = None
        if session is not None:
            record = self._attendance.find_record(student_id=student_id, session_id=session.session_id)
        return AttendanceState.from_record(student_id=student_id, session_date=session_date, record=record)

    def toggle(
        self,
        student_id: int,
        action: AttendanceAction,
        session_date: date,
        *,
        now: datetime | None = None,
    ) -> AttendanceState:
        """Flip the current check-in or check-out state (the roster's In/Out buttons)."""

        current = self.current_state(student_id, session_date)
        if action == AttendanceAction.CHECK_IN:
            return self.set_check_in(student_id, session_date, not current.checked_in, now=now)
        return self.set_check_out(student_id, session_date, not current.checked_out, now=now)
