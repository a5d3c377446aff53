from __future__ import annotations

from bookclub.application.ports.clubs_port import ClubsPort
from bookclub.domain.entities.club import Club


class ListClubsUseCase:
    def __init__(self, *, clubs_port: ClubsPort):
        self._clubs_port = clubs_port

    def execute(self) -> list[Club]:
        return self._clubs_port.list_clubs()
