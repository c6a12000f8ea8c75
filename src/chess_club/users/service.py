from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .repository import CoachRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionCoach:
    """What we store into Flask session after login."""

    coach_id: int
    full_name: str


class AuthService:
    """Use case: authenticate a coach (login)."""

    def __init__(self, coaches: CoachRepository):
        self._coaches = coaches

    def authenticate(self, username: str, password: str) -> SessionCoach:
        coach = self._coaches.get_by_username((username or "").strip())
        if not coach or not coach.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(coach.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("failed login for %s", username)
            raise AuthenticationError("Invalid username or password")

        return SessionCoach(coach_id=coach.coach_id, full_name=coach.full_name)
