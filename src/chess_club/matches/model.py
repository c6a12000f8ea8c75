from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import MatchResult


@dataclass(frozen=True)
class Match:
    """Domain entity: one game between two club members."""

    match_id: int
    white_student_id: int
    black_student_id: int
    result: MatchResult
    played_on: date
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AchievementStats:
    five_point_club: int
    chess_champions: int
    active_players: int
    social_players: int
