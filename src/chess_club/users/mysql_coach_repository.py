from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Coach
from .repository import CoachRepository


def _to_coach(row: dict) -> Coach:
    return Coach(
        coach_id=int(row["coach_id"]),
        full_name=row["full_name"],
        username=row["username"],
        password_hash=row["password_hash"],
        is_active=bool(row.get("is_active", True)),
    )


class MySQLCoachRepository(CoachRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT coach_id, full_name, username, password_hash, is_active
                FROM coaches
                WHERE coach_id=%s
                """,
                (int(coach_id),),
            )
            row = fetchone(cur)
            return _to_coach(row) if row else None

    def get_by_username(self, username: str) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT coach_id, full_name, username, password_hash, is_active
                FROM coaches
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            return _to_coach(row) if row else None
