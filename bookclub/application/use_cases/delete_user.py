from __future__ import annotations

from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.exceptions import UserNotFoundError


class DeleteUserUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, *, user_id: int) -> None:
        if self._users_port.delete_user(user_id=user_id) == 0:
            raise UserNotFoundError("User not found.")
