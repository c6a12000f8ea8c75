from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from ..attendance.model import AttendanceStats
from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_time_label, is_club_day, target_session_date
from ..core.constants import DEFAULT_SESSION_END, DEFAULT_SESSION_START
from ..matches.service import MatchService


@dataclass(frozen=True)
class DashboardData:
    today: date
    target_date: date
    is_club_day: bool
    session_start: str
    session_end: str
    stats: AttendanceStats
    recent_matches: list[dict]


class DashboardService:
    """Aggregates the header, club-day alert and stat cards."""

    def __init__(self, attendance: AttendanceService, matches: MatchService):
        self._attendance = attendance
        self._matches = matches

    def build(self, today: date) -> DashboardData:
        target = target_session_date(today)
        roster = self._attendance.roster_for(target)

        start: time = roster.session.start_time if roster.session else DEFAULT_SESSION_START
        end: time = roster.session.end_time if roster.session else DEFAULT_SESSION_END

        return DashboardData(
            today=today,
            target_date=target,
            is_club_day=is_club_day(today),
            session_start=format_time_label(start),
            session_end=format_time_label(end),
            stats=roster.stats,
            recent_matches=self._matches.recent_matches(),
        )
