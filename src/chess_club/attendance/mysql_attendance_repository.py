from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord, AttendanceSession
from .repository import UNCHANGED, AttendanceRepository


def _to_session(r: dict) -> AttendanceSession:
    return AttendanceSession(
        session_id=int(r["session_id"]),
        session_date=r["session_date"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
    )


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        student_id=int(r["student_id"]),
        session_id=int(r["session_id"]),
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
    )


_SESSION_SELECT = """
    SELECT session_id, session_date, start_time, end_time
    FROM attendance_sessions
    WHERE session_date=%s
"""

_RECORD_COLUMNS = "record_id, student_id, session_id, check_in_time, check_out_time"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_session_by_date(self, session_date: date) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SESSION_SELECT, (session_date,))
            r = fetchone(cur)
            return _to_session(r) if r else None

    def create_session(self, *, session_date: date, start_time: time, end_time: time) -> AttendanceSession:
        with db_cursor(self._conn_factory) as (_, cur):
            # uq_sessions_date turns a concurrent second insert into a no-op.
            cur.execute(
                """
                INSERT INTO attendance_sessions(session_date, start_time, end_time)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE session_id=session_id
                """,
                (session_date, start_time, end_time),
            )
            cur.execute(_SESSION_SELECT, (session_date,))
            return _to_session(fetchone(cur))

    def find_record(self, *, student_id: int, session_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND session_id=%s
                """,
                (int(student_id), int(session_id)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_record(
        self,
        *,
        student_id: int,
        session_id: int,
        check_in_time: Optional[datetime] = None,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, session_id, check_in_time)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE check_in_time=COALESCE(check_in_time, VALUES(check_in_time))
                """,
                (int(student_id), int(session_id), check_in_time),
            )
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND session_id=%s
                """,
                (int(student_id), int(session_id)),
            )
            return _to_record(fetchone(cur))

    def update_record(self, record_id: int, *, check_in_time=UNCHANGED, check_out_time=UNCHANGED) -> AttendanceRecord:
        assignments: list[str] = []
        params: list[object] = []
        if check_in_time is not UNCHANGED:
            assignments.append("check_in_time=%s")
            params.append(check_in_time)
        if check_out_time is not UNCHANGED:
            assignments.append("check_out_time=%s")
            params.append(check_out_time)

        with db_cursor(self._conn_factory) as (_, cur):
            if assignments:
                cur.execute(
                    f"UPDATE attendance_records SET {', '.join(assignments)} WHERE record_id=%s",
                    (*params, int(record_id)),
                )
            cur.execute(
                f"SELECT {_RECORD_COLUMNS} FROM attendance_records WHERE record_id=%s",
                (int(record_id),),
            )
            r = fetchone(cur)
            if not r:
                raise NotFoundError(f"Attendance record {record_id} not found")
            return _to_record(r)

    def delete_record(self, record_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE record_id=%s", (int(record_id),))

    def list_records_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records
                WHERE session_id=%s
                ORDER BY record_id ASC
                """,
                (int(session_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]
