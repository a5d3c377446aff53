from __future__ import annotations

from bookclub.application.dto.clubs import UpdateClubInput
from bookclub.application.ports.clubs_port import ClubsPort
from bookclub.domain.entities.club import Club
from bookclub.domain.exceptions import ClubNotFoundError, EmptyUpdateError

from .auth_common import utcnow


class UpdateClubUseCase:
    def __init__(self, *, clubs_port: ClubsPort):
        self._clubs_port = clubs_port

    def execute(self, command: UpdateClubInput) -> Club:
        if command.name is None and command.description is None:
            raise EmptyUpdateError("No fields to update.")

        club = self._clubs_port.update_club(
            club_id=command.club_id,
            name=command.name,
            description=command.description,
            updated_at=utcnow(),
        )
        if club is None:
            raise ClubNotFoundError("Club not found.")
        return club
