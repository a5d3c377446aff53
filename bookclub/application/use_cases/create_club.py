from __future__ import annotations

from bookclub.application.dto.clubs import CreateClubInput
from bookclub.application.ports.clubs_port import ClubsPort
from bookclub.domain.entities.club import Club

from .auth_common import utcnow


class CreateClubUseCase:
    def __init__(self, *, clubs_port: ClubsPort):
        self._clubs_port = clubs_port

    def execute(self, command: CreateClubInput) -> Club:
        name = command.name.strip()
        if not name:
            raise ValueError("name is required.")

        now = utcnow()
        return self._clubs_port.create_club(
            name=name,
            description=command.description,
            created_at=now,
            updated_at=now,
        )
