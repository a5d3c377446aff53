from __future__ import annotations

from datetime import datetime
from typing import Protocol

from bookclub.domain.entities.club import Club, Membership


class ClubsPort(Protocol):
    def create_club(
        self,
        *,
        name: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Club:
        ...

    def list_clubs(self) -> list[Club]:
        ...

    def get_club_by_id(self, *, club_id: int) -> Club | None:
        ...

    def update_club(
        self,
        *,
        club_id: int,
        name: str | None,
        description: str | None,
        updated_at: datetime,
    ) -> Club | None:
        ...

    def delete_club(self, *, club_id: int) -> int:
        ...


class MembershipsPort(Protocol):
    def create_membership(
        self,
        *,
        user_id: int,
        club_id: int,
        permission_level: int,
        created_at: datetime,
    ) -> Membership:
        ...

    def list_memberships(self, *, user_id: int | None, club_id: int | None) -> list[Membership]:
        ...

    def get_membership_by_id(self, *, membership_id: int) -> Membership | None:
        ...

    def get_membership_for_user_club(self, *, user_id: int, club_id: int) -> Membership | None:
        ...

    def delete_membership(self, *, membership_id: int) -> int:
        ...
