from __future__ import annotations

from bookclub.application.dto.clubs import ListMembershipsInput
from bookclub.application.ports.clubs_port import MembershipsPort
from bookclub.domain.entities.club import Membership


class ListMembershipsUseCase:
    def __init__(self, *, memberships_port: MembershipsPort):
        self._memberships_port = memberships_port

    def execute(self, command: ListMembershipsInput) -> list[Membership]:
        return self._memberships_port.list_memberships(
            user_id=command.user_id,
            club_id=command.club_id,
        )
