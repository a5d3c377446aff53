from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateClubInput:
    name: str
    description: str


@dataclass(frozen=True)
class UpdateClubInput:
    club_id: int
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class CreateMembershipInput:
    user_id: int
    club_id: int
    permission_level: int


@dataclass(frozen=True)
class ListMembershipsInput:
    user_id: int | None = None
    club_id: int | None = None
