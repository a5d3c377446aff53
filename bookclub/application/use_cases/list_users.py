from __future__ import annotations

from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User


class ListUsersUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self) -> list[User]:
        return self._users_port.list_users()
