from __future__ import annotations

from enum import Enum


class AttendanceAction(str, Enum):
    """Button pressed on the attendance roster."""

    CHECK_IN = "checkin"
    CHECK_OUT = "checkout"


class MatchResult(str, Enum):
    """Outcome of a single game, stored as-is in the matches table."""

    WHITE_WIN = "WHITE_WIN"
    BLACK_WIN = "BLACK_WIN"
    DRAW = "DRAW"
