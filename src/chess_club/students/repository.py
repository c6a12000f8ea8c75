from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Student]:
        """Active students ordered by grade, then last name."""

        raise NotImplementedError

    def list_all(self, *, grade: Optional[int] = None, search: Optional[str] = None) -> Sequence[Student]:
        """Directory listing (active and inactive), ordered by grade, then last name.

        `search` matches first or last name, case-insensitive.
        """

        raise NotImplementedError

    def create(self, *, first_name: str, last_name: str, grade: int, teacher: str) -> int:
        raise NotImplementedError

    def set_active(self, student_id: int, *, active: bool) -> bool:
        raise NotImplementedError
