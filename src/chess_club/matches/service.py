from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date

from ..core.constants import (
    CHAMPION_POINTS,
    DEFAULT_RECENT_MATCHES,
    FIVE_POINT_CLUB_POINTS,
    SOCIAL_PLAYER_OPPONENTS,
)
from ..core.enums import MatchResult
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AchievementStats
from .repository import MatchRepository

logger = logging.getLogger(__name__)

_RESULT_LABELS = {
    MatchResult.WHITE_WIN: "1-0",
    MatchResult.BLACK_WIN: "0-1",
    MatchResult.DRAW: "½-½",
}


class MatchService:
    def __init__(self, matches: MatchRepository, students: StudentRepository):
        self._matches = matches
        self._students = students

    def record_match(self, *, white_student_id: int, black_student_id: int, result, played_on: date) -> int:
        if int(white_student_id) == int(black_student_id):
            raise ValidationError("A student cannot play against themselves")

        try:
            result = MatchResult(result)
        except ValueError:
            raise ValidationError("Unknown match result")

        for sid in (white_student_id, black_student_id):
            if not self._students.get_by_id(int(sid)):
                raise NotFoundError(f"Student {sid} not found")

        match_id = self._matches.create(
            white_student_id=int(white_student_id),
            black_student_id=int(black_student_id),
            result=result,
            played_on=played_on,
        )
        logger.info("recorded match %s: %s vs %s (%s)", match_id, white_student_id, black_student_id, result.value)
        return match_id

    def recent_matches(self, *, limit: int = DEFAULT_RECENT_MATCHES) -> list[dict]:
        rows = self._matches.list_recent(limit)
        names: dict[int, str] = {}

        def _name(student_id: int) -> str:
            if student_id not in names:
                s = self._students.get_by_id(student_id)
                names[student_id] = s.full_name if s else f"#{student_id}"
            return names[student_id]

        return [
            {
                "match_id": m.match_id,
                "white": _name(m.white_student_id),
                "black": _name(m.black_student_id),
                "result": _RESULT_LABELS[m.result],
                "played_on": m.played_on.strftime("%Y-%m-%d"),
            }
            for m in rows
        ]

    def achievement_stats(self) -> AchievementStats:
        points: dict[int, float] = defaultdict(float)
        opponents: dict[int, set[int]] = defaultdict(set)

        for m in self._matches.list_all():
            white, black = m.white_student_id, m.black_student_id
            opponents[white].add(black)
            opponents[black].add(white)
            if m.result == MatchResult.WHITE_WIN:
                points[white] += 1
            elif m.result == MatchResult.BLACK_WIN:
                points[black] += 1
            else:
                points[white] += 0.5
                points[black] += 0.5

        return AchievementStats(
            five_point_club=sum(1 for p in points.values() if p >= FIVE_POINT_CLUB_POINTS),
            chess_champions=sum(1 for p in points.values() if p >= CHAMPION_POINTS),
            active_players=len(opponents),
            social_players=sum(1 for o in opponents.values() if len(o) >= SOCIAL_PLAYER_OPPONENTS),
        )
