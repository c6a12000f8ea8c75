from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import CLUB_WEEKDAY


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_club_day(day: date) -> bool:
    return day.weekday() == CLUB_WEEKDAY


def target_session_date(today: date) -> date:
    """Date attendance actions apply to: today on club day, otherwise the next club day."""
    days_ahead = (CLUB_WEEKDAY - today.weekday()) % 7
    return today + timedelta(days=days_ahead)


def format_time_label(value) -> str:
    """'15:30' -> '3:30 PM' for the dashboard header."""
    return value.strftime("%I:%M %p").lstrip("0")
