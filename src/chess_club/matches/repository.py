from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import MatchResult
from .model import Match


class MatchRepository(Protocol):
    def list_recent(self, limit: int) -> Sequence[Match]:
        """Newest first (by created_at)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Match]:
        raise NotImplementedError

    def create(self, *, white_student_id: int, black_student_id: int, result: MatchResult, played_on: date) -> int:
        raise NotImplementedError
