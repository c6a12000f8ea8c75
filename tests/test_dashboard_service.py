from datetime import date

from chess_club.attendance.service import AttendanceService
from chess_club.core.enums import AttendanceAction
from chess_club.dashboard.service import DashboardService
from chess_club.matches.service import MatchService


def test_dashboard_on_club_day(attendance_repo, students_repo, matches_repo, club_day, fixed_now):
    attendance = AttendanceService(attendance_repo, students_repo)
    attendance.toggle(1, AttendanceAction.CHECK_IN, club_day, now=fixed_now)
    svc = DashboardService(attendance, MatchService(matches_repo, students_repo))

    data = svc.build(club_day)

    assert data.is_club_day is True
    assert data.target_date == club_day
    assert data.session_start == "3:30 PM"
    assert data.session_end == "4:00 PM"
    assert data.stats.present_today == 1
    assert data.stats.attendance_rate == 33
    assert data.recent_matches == []


def test_dashboard_before_club_day_targets_next_wednesday(attendance_repo, students_repo, matches_repo):
    svc = DashboardService(AttendanceService(attendance_repo, students_repo), MatchService(matches_repo, students_repo))

    data = svc.build(date(2026, 10, 19))

    assert data.is_club_day is False
    assert data.target_date == date(2026, 10, 21)
    assert data.stats.present_today == 0
