from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coach:
    """Domain entity: a coach account that can log into the dashboard.

    Plain data object, no DB access.
    """

    coach_id: int
    full_name: str
    username: str
    password_hash: str
    is_active: bool = True
