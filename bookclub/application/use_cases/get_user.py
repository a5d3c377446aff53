from __future__ import annotations

from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import UserNotFoundError


class GetUserUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, *, user_id: int) -> User:
        user = self._users_port.get_user_by_id(user_id=user_id)
        if user is None:
            raise UserNotFoundError("User not found.")
        return user
