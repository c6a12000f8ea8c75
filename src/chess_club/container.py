from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import AttendanceReconciler
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .matches.mysql_match_repository import MySQLMatchRepository
from .matches.repository import MatchRepository
from .matches.service import MatchService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_coach_repository import MySQLCoachRepository
from .users.repository import CoachRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    coaches_repo: CoachRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    matches_repo: MatchRepository

    auth_service: AuthService
    student_service: StudentService
    attendance_service: AttendanceService
    match_service: MatchService
    dashboard_service: DashboardService


def wire(
    *,
    coaches_repo: CoachRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    matches_repo: MatchRepository,
) -> Container:
    """Build services on top of any repository implementation (MySQL or in-memory)."""

    attendance_service = AttendanceService(
        attendance_repo,
        students_repo,
        reconciler=AttendanceReconciler(attendance_repo),
    )
    match_service = MatchService(matches_repo, students_repo)

    return Container(
        coaches_repo=coaches_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        matches_repo=matches_repo,
        auth_service=AuthService(coaches_repo),
        student_service=StudentService(students_repo),
        attendance_service=attendance_service,
        match_service=match_service,
        dashboard_service=DashboardService(attendance_service, match_service),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        connect_timeout=int(db_config.get("connect_timeout", 10)),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire(
        coaches_repo=MySQLCoachRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        matches_repo=MySQLMatchRepository(conn),
    )
