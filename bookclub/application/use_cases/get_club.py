from __future__ import annotations

from bookclub.application.ports.clubs_port import ClubsPort
from bookclub.domain.entities.club import Club
from bookclub.domain.exceptions import ClubNotFoundError


class GetClubUseCase:
    def __init__(self, *, clubs_port: ClubsPort):
        self._clubs_port = clubs_port

    def execute(self, *, club_id: int) -> Club:
        club = self._clubs_port.get_club_by_id(club_id=club_id)
        if club is None:
            raise ClubNotFoundError("Club not found.")
        return club
