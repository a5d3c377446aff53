from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


MIN_PERMISSION_LEVEL = 0
MAX_PERMISSION_LEVEL = 2


@dataclass(frozen=True)
class Club:
    id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Membership:
    id: int
    user_id: int
    club_id: int
    permission_level: int
    created_at: datetime
