from __future__ import annotations

from datetime import date

from ..core.constants import MAX_GRADE, MIN_GRADE
from ..core.exceptions import ValidationError
from .datetime_utils import is_club_day


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_grade(value) -> int:
    try:
        grade = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Grade must be a number")
    if grade < MIN_GRADE or grade > MAX_GRADE:
        raise ValidationError(f"Grade must be between {MIN_GRADE} and {MAX_GRADE}")
    return grade


def require_upcoming_club_day(day: date, today: date) -> date:
    """Attendance is only recorded for today's or a later club session."""
    if day < today:
        raise ValidationError(f"{day.isoformat()} is in the past")
    if not is_club_day(day):
        raise ValidationError(f"{day.isoformat()} is not a club day")
    return day
