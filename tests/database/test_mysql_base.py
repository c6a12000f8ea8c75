from datetime import time, timedelta

import mysql.connector
import pytest

from chess_club.core.exceptions import BackendUnavailableError, NotFoundError
from chess_club.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from chess_club.database.mysql_base import db_cursor, normalize_mysql_time


class FakeCursor:
    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.closed = False

    def execute(self, sql, params=None):
        if self.fail_with:
            raise self.fail_with

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, connect_error=None):
        self._conn = conn
        self._connect_error = connect_error

    def connect(self):
        if self._connect_error:
            raise self._connect_error
        return self._conn


def test_db_cursor_commits_on_success():
    conn = FakeConn(FakeCursor())
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")
    assert conn.committed and conn.closed and not conn.rolled_back


def test_db_cursor_maps_driver_errors_to_backend_unavailable():
    conn = FakeConn(FakeCursor(fail_with=mysql.connector.Error("lock wait timeout")))
    with pytest.raises(BackendUnavailableError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("UPDATE attendance_records SET check_out_time=NULL")
    assert conn.rolled_back and conn.closed and not conn.committed


def test_db_cursor_connection_failure_is_backend_unavailable():
    with pytest.raises(BackendUnavailableError):
        with db_cursor(FakeFactory(connect_error=mysql.connector.Error("refused"))):
            pass


def test_db_cursor_lets_domain_errors_through():
    conn = FakeConn(FakeCursor())
    with pytest.raises(NotFoundError):
        with db_cursor(FakeFactory(conn)):
            raise NotFoundError("missing")
    assert conn.rolled_back


@pytest.mark.parametrize(
    "value,expected",
    [
        (time(15, 30), time(15, 30)),
        (timedelta(hours=16), time(16, 0)),
        ("15:30:00", time(15, 30)),
        (None, None),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_sql_splitter_handles_quotes():
    sql = _strip_create_db_and_use("CREATE DATABASE x;\nUSE x;\nINSERT INTO t VALUES('a;b');\nSELECT 1;")
    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES('a;b')", "SELECT 1"]
