from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a club member.

    Only `active` changes after registration.
    """

    student_id: int
    first_name: str
    last_name: str
    grade: int
    teacher: str
    active: bool = True
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
