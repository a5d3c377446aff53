from __future__ import annotations

from bookclub.application.ports.clubs_port import ClubsPort
from bookclub.domain.exceptions import ClubNotFoundError


class DeleteClubUseCase:
    def __init__(self, *, clubs_port: ClubsPort):
        self._clubs_port = clubs_port

    def execute(self, *, club_id: int) -> None:
        if self._clubs_port.delete_club(club_id=club_id) == 0:
            raise ClubNotFoundError("Club not found.")
