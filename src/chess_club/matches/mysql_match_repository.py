from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import MatchResult
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Match
from .repository import MatchRepository

_COLUMNS = "match_id, white_student_id, black_student_id, result, played_on, created_at"


def _to_match(r: dict) -> Match:
    return Match(
        match_id=int(r["match_id"]),
        white_student_id=int(r["white_student_id"]),
        black_student_id=int(r["black_student_id"]),
        result=MatchResult(r["result"]),
        played_on=r["played_on"],
        created_at=r.get("created_at"),
    )


class MySQLMatchRepository(MatchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_recent(self, limit: int) -> Sequence[Match]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM matches
                ORDER BY created_at DESC, match_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [_to_match(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Match]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM matches ORDER BY match_id ASC")
            return [_to_match(r) for r in fetchall(cur)]

    def create(self, *, white_student_id: int, black_student_id: int, result: MatchResult, played_on: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO matches(white_student_id, black_student_id, result, played_on)
                VALUES(%s,%s,%s,%s)
                """,
                (int(white_student_id), int(black_student_id), result.value, played_on),
            )
            return int(cur.lastrowid)
